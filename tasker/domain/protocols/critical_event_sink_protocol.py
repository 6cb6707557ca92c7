"""Critical event sink protocol (port).

An append-only recorder of critical task events. Failures are raised, not
swallowed: a failed audit write fails the triggering command.
"""

from typing import Protocol

from tasker.domain.events.task_events import HighPriorityTaskChanged


class CriticalEventSinkProtocol(Protocol):
    """Durable audit recorder for high-priority task changes."""

    async def record(self, event: HighPriorityTaskChanged) -> None:
        """Append the event to the audit trail.

        Raises:
            Exception: Any storage failure propagates to the caller.
        """
        ...
