"""Domain events."""

from tasker.domain.events.base_event import DomainEvent
from tasker.domain.events.task_events import HighPriorityTaskChanged

__all__ = ["DomainEvent", "HighPriorityTaskChanged"]
