"""Critical event sink backed by the append-only ``critical_events`` table.

Architecture:
    - Writes in the dispatch's unit of work, so the audit row commits
      together with the task change that triggered it and a second writer
      never waits on the command's own lock.
    - Flushes immediately so a failed insert surfaces before the
      notification goes out.
    - Errors are NOT caught: a failed audit write fails the command.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from tasker.domain.events.task_events import HighPriorityTaskChanged
from tasker.infrastructure.persistence.models.critical_event import CriticalEvent


class DatabaseCriticalEventSink:
    """Inserts one ``critical_events`` row per event.

    Attributes:
        session: Unit-of-work session of the current dispatch.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def record(self, event: HighPriorityTaskChanged) -> None:
        """Append the event.

        Raises:
            SQLAlchemyError: If the insert fails.
        """
        self.session.add(
            CriticalEvent(
                event_id=event.event_id,
                event_type=type(event).__name__,
                task_id=event.task_id,
                title=event.title,
                priority=event.priority.value,
                reason=event.reason,
                occurred_at=event.occurred_at,
            )
        )
        await self.session.flush()
