"""User database model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from tasker.infrastructure.persistence.base import BaseModel


class User(BaseModel):
    """Registered user.

    Fields:
        id, created_at: From BaseModel.
        email: Lowercase email (unique, indexed).
        password_hash: Bcrypt hash.
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Lowercase-normalized email address",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt password hash (NEVER plaintext)",
    )
