"""DeleteTaskItem command handler."""

from tasker.application.commands.task_commands import DeleteTaskItem
from tasker.application.errors import task_not_found
from tasker.core.errors import DomainError
from tasker.core.result import Failure, Result, Success
from tasker.domain.protocols.realtime_notifier_protocol import (
    RealtimeNotifierProtocol,
)
from tasker.domain.protocols.task_item_repository import TaskItemRepository


class DeleteTaskItemHandler:
    def __init__(
        self,
        task_repo: TaskItemRepository,
        notifier: RealtimeNotifierProtocol,
    ) -> None:
        self._task_repo = task_repo
        self._notifier = notifier

    async def handle(self, cmd: DeleteTaskItem) -> Result[None, DomainError]:
        task = await self._task_repo.find_by_id(cmd.id) if cmd.id else None
        if task is None:
            return Failure(error=task_not_found(cmd.id))

        await self._task_repo.delete(task.id)
        await self._notifier.notify_task_deleted(task.id)
        return Success(value=None)
