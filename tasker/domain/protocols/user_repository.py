"""UserRepository protocol (port)."""

from typing import Protocol
from uuid import UUID

from tasker.domain.entities.user import User


class UserRepository(Protocol):
    """User persistence operations."""

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by id."""
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email, case-insensitively.

        Args:
            email: Email in any case.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def save(self, user: User) -> bool:
        """Persist a new user.

        Returns:
            False if another user already holds the email, True otherwise.
        """
        ...
