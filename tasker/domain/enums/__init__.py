"""Task domain enums."""

from tasker.domain.enums.priority import Priority
from tasker.domain.enums.task_status import TaskStatus

__all__ = ["Priority", "TaskStatus"]
