"""Task DTOs."""

import math
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from tasker.domain.entities.task_item import TaskItem
from tasker.domain.enums import Priority, TaskStatus


@dataclass(frozen=True, kw_only=True)
class TaskDto:
    """Read model of a task item."""

    id: UUID
    title: str
    description: str | None
    priority: Priority
    status: TaskStatus
    due_date: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, task: TaskItem) -> "TaskDto":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            priority=task.priority,
            status=task.status,
            due_date=task.due_date,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


@dataclass(frozen=True, kw_only=True)
class PagedResult[T]:
    """One page of results plus paging metadata.

    Attributes:
        items: Items on this page.
        total_count: Matching items across all pages.
        page_number: 1-based page index.
        page_size: Requested page size.
    """

    items: list[T]
    total_count: int
    page_number: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size) if self.page_size else 0

    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages


@dataclass(frozen=True, kw_only=True)
class TaskStats:
    """Task counts per status."""

    pending: int
    in_progress: int
    completed: int
    archived: int

    @property
    def total(self) -> int:
        return self.pending + self.in_progress + self.completed + self.archived
