"""Domain event handlers."""

from tasker.application.event_handlers.high_priority_task_changed_relay import (
    HighPriorityTaskChangedRelay,
)

__all__ = ["HighPriorityTaskChangedRelay"]
