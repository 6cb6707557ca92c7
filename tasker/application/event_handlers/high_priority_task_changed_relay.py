"""Relay for HighPriorityTaskChanged.

Steps run strictly in order and both are required:
    1. Record the event in the critical event (audit) sink.
    2. Broadcast it to connected clients.

Neither step catches errors. If the audit write fails, no notification is
sent; if either fails, the triggering command fails with it.
"""

from tasker.domain.entities.task_item import TaskItem
from tasker.domain.events.task_events import HighPriorityTaskChanged
from tasker.domain.protocols.critical_event_sink_protocol import (
    CriticalEventSinkProtocol,
)
from tasker.domain.protocols.logger_protocol import LoggerProtocol
from tasker.domain.protocols.realtime_notifier_protocol import (
    RealtimeNotifierProtocol,
)


class HighPriorityTaskChangedRelay:
    """Audit-then-notify fan-out for high-priority task changes."""

    def __init__(
        self,
        audit_sink: CriticalEventSinkProtocol,
        notifier: RealtimeNotifierProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._audit_sink = audit_sink
        self._notifier = notifier
        self._logger = logger

    async def handle(self, event: HighPriorityTaskChanged) -> None:
        """Record, then notify.

        Raises:
            Exception: Whatever the sink or notifier raised.
        """
        await self._audit_sink.record(event)
        await self._notifier.notify_high_priority_task_changed(
            event.task_id, event.title, event.reason
        )
        self._logger.info(
            "high_priority_task_relayed",
            event_id=str(event.event_id),
            task_id=str(event.task_id),
        )

    async def task_changed(self, task: TaskItem, reason: str) -> None:
        """Build the event for ``task`` and relay it."""
        await self.handle(
            HighPriorityTaskChanged(
                task_id=task.id,
                title=task.title,
                priority=task.priority,
                reason=reason,
            )
        )
