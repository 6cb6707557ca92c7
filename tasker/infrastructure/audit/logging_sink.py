"""Critical event sink that writes to the structured log.

Suited to deployments that ship warnings to a log store. Structured fields
carry the event; the message is the stable event name.
"""

from tasker.domain.events.task_events import HighPriorityTaskChanged
from tasker.domain.protocols.logger_protocol import LoggerProtocol


class LoggingCriticalEventSink:
    """Records critical task events as WARNING log entries."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def record(self, event: HighPriorityTaskChanged) -> None:
        self._logger.warning(
            "critical_task_update",
            event_id=str(event.event_id),
            task_id=str(event.task_id),
            title=event.title,
            priority=event.priority.value,
            reason=event.reason,
            occurred_at=event.occurred_at.isoformat(),
        )
