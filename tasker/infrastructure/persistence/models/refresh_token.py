"""Refresh token database model.

Security:
    - token_hash: SHA-256 hex of the opaque secret (unique lookup key)
    - revoked_at: the only column written after insert
    - rows are never deleted so replayed tokens remain recognisable
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from tasker.infrastructure.persistence.base import BaseModel, UTCDateTime


class RefreshToken(BaseModel):
    """Issued refresh token.

    Indexes:
        - token_hash (unique) for redemption and logout lookups
        - user_id for listing a user's tokens
        - expires_at for cleanup queries
    """

    __tablename__ = "refresh_tokens"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="User who owns this refresh token",
    )

    token_hash: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        index=True,
        comment="SHA-256 hex digest of the refresh token (NEVER plaintext)",
    )

    expires_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        index=True,
    )

    revoked_at: Mapped[datetime | None] = mapped_column(
        UTCDateTime,
        nullable=True,
        comment="Set once on rotation or logout",
    )

    user_agent: Mapped[str | None] = mapped_column(String(512), nullable=True)

    ip_address: Mapped[str | None] = mapped_column(String(45), nullable=True)
