"""Task queries."""

from dataclasses import dataclass
from uuid import UUID

from tasker.application.cqrs.requests import Query
from tasker.application.dtos.task_dtos import PagedResult, TaskDto, TaskStats
from tasker.domain.enums import Priority, TaskStatus


@dataclass(frozen=True, kw_only=True)
class GetTaskItemById(Query[TaskDto]):
    id: UUID


@dataclass(frozen=True, kw_only=True)
class GetTaskItemsPaged(Query[PagedResult[TaskDto]]):
    """Filtered, sorted, paged task listing.

    Attributes:
        status: Only tasks in this status.
        priority: Only tasks with this priority.
        search: Case-insensitive match on title or description.
        page_number: 1-based page index.
        page_size: Items per page (1-100).
        sort: title, priority, status, duedate or created, optionally
            suffixed with ``_desc``. Unknown values sort newest first.
    """

    status: TaskStatus | None = None
    priority: Priority | None = None
    search: str | None = None
    page_number: int = 1
    page_size: int = 10
    sort: str | None = None


@dataclass(frozen=True, kw_only=True)
class GetTaskItemStats(Query[TaskStats]):
    pass
