"""GetTaskItemStats query handler."""

from tasker.application.dtos.task_dtos import TaskStats
from tasker.application.queries.task_queries import GetTaskItemStats
from tasker.core.errors import DomainError
from tasker.core.result import Result, Success
from tasker.domain.enums import TaskStatus
from tasker.domain.protocols.task_item_repository import TaskItemRepository


class GetTaskItemStatsHandler:
    def __init__(self, task_repo: TaskItemRepository) -> None:
        self._task_repo = task_repo

    async def handle(
        self, query: GetTaskItemStats
    ) -> Result[TaskStats, DomainError]:
        counts = await self._task_repo.count_by_status()
        return Success(
            value=TaskStats(
                pending=counts.get(TaskStatus.PENDING, 0),
                in_progress=counts.get(TaskStatus.IN_PROGRESS, 0),
                completed=counts.get(TaskStatus.COMPLETED, 0),
                archived=counts.get(TaskStatus.ARCHIVED, 0),
            )
        )
