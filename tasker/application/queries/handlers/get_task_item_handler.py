"""GetTaskItemById query handler."""

from tasker.application.dtos.task_dtos import TaskDto
from tasker.application.errors import task_not_found
from tasker.application.queries.task_queries import GetTaskItemById
from tasker.core.errors import DomainError
from tasker.core.result import Failure, Result, Success
from tasker.domain.protocols.task_item_repository import TaskItemRepository


class GetTaskItemHandler:
    def __init__(self, task_repo: TaskItemRepository) -> None:
        self._task_repo = task_repo

    async def handle(self, query: GetTaskItemById) -> Result[TaskDto, DomainError]:
        task = await self._task_repo.find_by_id(query.id)
        if task is None:
            return Failure(error=task_not_found(query.id))
        return Success(value=TaskDto.from_entity(task))
