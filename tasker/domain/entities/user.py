"""User domain entity for authentication.

Pure business logic, no framework dependencies.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(slots=True, kw_only=True)
class User:
    """Registered user.

    Users are created by registration and not modified by this core.

    Attributes:
        id: Unique user identifier (UUIDv7).
        email: Lowercase-normalized email, unique across users.
        password_hash: Bcrypt hash (never plaintext).
        created_at: When the user registered.
    """

    id: UUID
    email: str
    password_hash: str
    created_at: datetime

    def __post_init__(self) -> None:
        if self.email != self.email.strip().lower():
            raise ValueError("User email must be normalized to lowercase")
