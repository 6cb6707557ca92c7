"""SQLAlchemy repository implementations."""

from tasker.infrastructure.persistence.repositories.refresh_token_repository import (
    RefreshTokenRepository,
)
from tasker.infrastructure.persistence.repositories.task_item_repository import (
    TaskItemRepository,
)
from tasker.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = ["RefreshTokenRepository", "TaskItemRepository", "UserRepository"]
