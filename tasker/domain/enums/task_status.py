"""Task workflow status."""

from enum import Enum


class TaskStatus(str, Enum):
    """Lifecycle states of a task item."""

    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    ARCHIVED = "Archived"
