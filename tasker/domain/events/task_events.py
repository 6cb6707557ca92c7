"""Task domain events."""

from dataclasses import dataclass
from uuid import UUID

from tasker.domain.enums import Priority
from tasker.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class HighPriorityTaskChanged(DomainEvent):
    """A task was created or updated with High priority.

    Never persisted as an entity. It is recorded by the critical event sink and
    then broadcast to connected clients.

    Attributes:
        task_id: Affected task.
        title: Task title at the time of the change.
        priority: Priority after the change (always High today).
        reason: Human-readable cause, e.g. "Task priority elevated to High".
    """

    task_id: UUID
    title: str
    priority: Priority
    reason: str
