"""UpdateTaskItem command handler.

A task that ends up High priority is relayed with a reason that says
whether it was just elevated or was already High.
"""

from tasker.application.commands.task_commands import UpdateTaskItem
from tasker.application.errors import task_not_found
from tasker.application.event_handlers.high_priority_task_changed_relay import (
    HighPriorityTaskChangedRelay,
)
from tasker.core.errors import DomainError
from tasker.core.result import Failure, Result, Success
from tasker.domain.enums import Priority, TaskStatus
from tasker.domain.protocols.realtime_notifier_protocol import (
    RealtimeNotifierProtocol,
)
from tasker.domain.protocols.task_item_repository import TaskItemRepository

ELEVATED_TO_HIGH = "Task priority elevated to High"
HIGH_PRIORITY_UPDATED = "High priority task updated"


class UpdateTaskItemHandler:
    def __init__(
        self,
        task_repo: TaskItemRepository,
        notifier: RealtimeNotifierProtocol,
        high_priority_relay: HighPriorityTaskChangedRelay,
    ) -> None:
        self._task_repo = task_repo
        self._notifier = notifier
        self._high_priority_relay = high_priority_relay

    async def handle(self, cmd: UpdateTaskItem) -> Result[None, DomainError]:
        """Apply the update.

        Returns:
            Success(None), or Failure(NotFoundError) for an unknown id.
        """
        task = await self._task_repo.find_by_id(cmd.id) if cmd.id else None
        if task is None:
            return Failure(error=task_not_found(cmd.id))

        previous_priority = task.update(
            title=cmd.title.strip(),
            description=cmd.description,
            priority=Priority(cmd.priority),
            status=TaskStatus(cmd.status),
            due_date=cmd.due_date,
        )
        await self._task_repo.update(task)

        if task.is_high_priority:
            reason = (
                HIGH_PRIORITY_UPDATED
                if previous_priority is Priority.HIGH
                else ELEVATED_TO_HIGH
            )
            await self._high_priority_relay.task_changed(task, reason)
        await self._notifier.notify_task_updated(task.id, task.title)

        return Success(value=None)
