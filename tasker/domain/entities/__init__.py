"""Domain entities."""

from tasker.domain.entities.refresh_token import RefreshToken
from tasker.domain.entities.task_item import TaskItem
from tasker.domain.entities.user import User

__all__ = ["RefreshToken", "TaskItem", "User"]
