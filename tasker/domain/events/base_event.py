"""Base domain event class.

Domain events are immutable records of things that happened, named in past
tense (``HighPriorityTaskChanged``, not ``ChangeHighPriorityTask``).

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    ... class TaskArchived(DomainEvent):
    ...     task_id: UUID
    >>> event = TaskArchived(task_id=task.id)
    >>> event.event_id  # auto-generated
    >>> event.occurred_at  # auto-generated (UTC)
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    Attributes:
        event_id: Unique identifier of this event instance.
        occurred_at: When the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
