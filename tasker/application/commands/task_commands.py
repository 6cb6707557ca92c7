"""Task commands."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from tasker.application.cqrs.requests import Command
from tasker.application.dtos.task_dtos import TaskDto
from tasker.domain.enums import Priority, TaskStatus


@dataclass(frozen=True, kw_only=True)
class CreateTaskItem(Command[TaskDto]):
    title: str
    description: str | None = None
    priority: Priority = Priority.MEDIUM
    due_date: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateTaskItem(Command[None]):
    """Replace all editable fields of an existing task."""

    id: UUID | None
    title: str
    description: str | None = None
    priority: Priority = Priority.MEDIUM
    status: TaskStatus = TaskStatus.PENDING
    due_date: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteTaskItem(Command[None]):
    id: UUID | None
