"""Database models.

Importing this package registers every table on ``BaseModel.metadata``.
"""

from tasker.infrastructure.persistence.models.critical_event import CriticalEvent
from tasker.infrastructure.persistence.models.refresh_token import RefreshToken
from tasker.infrastructure.persistence.models.task_item import TaskItem
from tasker.infrastructure.persistence.models.user import User

__all__ = ["CriticalEvent", "RefreshToken", "TaskItem", "User"]
