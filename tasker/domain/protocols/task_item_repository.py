"""TaskItemRepository protocol (port)."""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol
from uuid import UUID

from tasker.domain.entities.task_item import TaskItem
from tasker.domain.enums import Priority, TaskStatus


class TaskSortKey(str, Enum):
    """Supported orderings for task listings."""

    TITLE = "title"
    TITLE_DESC = "title_desc"
    PRIORITY = "priority"
    PRIORITY_DESC = "priority_desc"
    STATUS = "status"
    STATUS_DESC = "status_desc"
    DUE_DATE = "duedate"
    DUE_DATE_DESC = "duedate_desc"
    CREATED = "created"
    CREATED_DESC = "created_desc"


@dataclass(frozen=True, slots=True, kw_only=True)
class TaskListCriteria:
    """Filter, ordering and window for a task listing.

    Attributes:
        status: Only tasks in this status.
        priority: Only tasks with this priority.
        search: Case-insensitive substring of title or description.
        sort: Ordering (newest first by default).
        offset: Rows to skip.
        limit: Maximum rows to return.
    """

    status: TaskStatus | None = None
    priority: Priority | None = None
    search: str | None = None
    sort: TaskSortKey = TaskSortKey.CREATED_DESC
    offset: int = 0
    limit: int = 10


class TaskItemRepository(Protocol):
    """Task persistence operations."""

    async def find_by_id(self, task_id: UUID) -> TaskItem | None:
        ...

    async def add(self, task: TaskItem) -> None:
        ...

    async def update(self, task: TaskItem) -> None:
        ...

    async def delete(self, task_id: UUID) -> None:
        ...

    async def list_paged(
        self, criteria: TaskListCriteria
    ) -> tuple[list[TaskItem], int]:
        """Return one page of matching tasks and the total match count."""
        ...

    async def count_by_status(self) -> dict[TaskStatus, int]:
        """Return task counts per status (missing statuses count as zero)."""
        ...
