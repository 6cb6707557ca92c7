"""GetTaskItemsPaged query handler."""

from tasker.application.dtos.task_dtos import PagedResult, TaskDto
from tasker.application.queries.task_queries import GetTaskItemsPaged
from tasker.core.errors import DomainError
from tasker.core.result import Result, Success
from tasker.domain.enums import Priority, TaskStatus
from tasker.domain.protocols.task_item_repository import (
    TaskItemRepository,
    TaskListCriteria,
    TaskSortKey,
)


def parse_sort(sort: str | None) -> TaskSortKey:
    """Map a client sort string to a sort key (newest first if unknown).

    Example:
        >>> parse_sort("Priority_Desc")
        <TaskSortKey.PRIORITY_DESC: 'priority_desc'>
        >>> parse_sort("bogus")
        <TaskSortKey.CREATED_DESC: 'created_desc'>
    """
    if not sort:
        return TaskSortKey.CREATED_DESC
    try:
        return TaskSortKey(sort.strip().lower())
    except ValueError:
        return TaskSortKey.CREATED_DESC


class ListTaskItemsHandler:
    def __init__(self, task_repo: TaskItemRepository) -> None:
        self._task_repo = task_repo

    async def handle(
        self, query: GetTaskItemsPaged
    ) -> Result[PagedResult[TaskDto], DomainError]:
        criteria = TaskListCriteria(
            status=TaskStatus(query.status) if query.status else None,
            priority=Priority(query.priority) if query.priority else None,
            search=query.search.strip() if query.search else None,
            sort=parse_sort(query.sort),
            offset=(query.page_number - 1) * query.page_size,
            limit=query.page_size,
        )
        tasks, total = await self._task_repo.list_paged(criteria)

        return Success(
            value=PagedResult(
                items=[TaskDto.from_entity(task) for task in tasks],
                total_count=total,
                page_number=query.page_number,
                page_size=query.page_size,
            )
        )
