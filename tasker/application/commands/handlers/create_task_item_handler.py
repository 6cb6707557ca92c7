"""CreateTaskItem command handler.

Flow:
1. Create the task (Pending) and save it
2. If High priority: relay HighPriorityTaskChanged (audit, then notify)
3. Broadcast TaskCreated
4. Return Success(TaskDto)

Relay errors propagate, so the unit of work rolls back and nothing is
broadcast after a failed audit write.
"""

from tasker.application.commands.task_commands import CreateTaskItem
from tasker.application.dtos.task_dtos import TaskDto
from tasker.application.event_handlers.high_priority_task_changed_relay import (
    HighPriorityTaskChangedRelay,
)
from tasker.core.errors import DomainError
from tasker.core.result import Result, Success
from tasker.domain.entities.task_item import TaskItem
from tasker.domain.enums import Priority
from tasker.domain.protocols.realtime_notifier_protocol import (
    RealtimeNotifierProtocol,
)
from tasker.domain.protocols.task_item_repository import TaskItemRepository

CREATED_WITH_HIGH_PRIORITY = "Task created with high priority"


class CreateTaskItemHandler:
    def __init__(
        self,
        task_repo: TaskItemRepository,
        notifier: RealtimeNotifierProtocol,
        high_priority_relay: HighPriorityTaskChangedRelay,
    ) -> None:
        self._task_repo = task_repo
        self._notifier = notifier
        self._high_priority_relay = high_priority_relay

    async def handle(self, cmd: CreateTaskItem) -> Result[TaskDto, DomainError]:
        task = TaskItem.create(
            title=cmd.title.strip(),
            description=cmd.description,
            priority=Priority(cmd.priority),
            due_date=cmd.due_date,
        )
        await self._task_repo.add(task)

        if task.is_high_priority:
            await self._high_priority_relay.task_changed(
                task, CREATED_WITH_HIGH_PRIORITY
            )
        await self._notifier.notify_task_created(task.id, task.title)

        return Success(value=TaskDto.from_entity(task))
