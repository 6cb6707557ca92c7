"""Refresh token domain entity.

A refresh token record is created on register, login and refresh. Its only
mutation is revocation; records are never deleted so the rotation chain stays
auditable. Only the SHA-256 hash of the opaque secret is kept.

State machine:
    Active -> Revoked  (terminal, written)
    Active -> Expired  (terminal, time-based, never written)
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID


@dataclass(slots=True, kw_only=True)
class RefreshToken:
    """Server-tracked refresh credential.

    Attributes:
        id: Record identifier.
        user_id: Owning user.
        token_hash: Hex SHA-256 of the opaque secret.
        created_at: Issue time.
        expires_at: Hard expiry.
        revoked_at: Revocation time, None while not revoked.
        user_agent: Optional client metadata captured at issue.
        ip_address: Optional client metadata captured at issue.
    """

    id: UUID
    user_id: UUID
    token_hash: str
    created_at: datetime
    expires_at: datetime
    revoked_at: datetime | None = None
    user_agent: str | None = None
    ip_address: str | None = None

    def is_expired(self, now: datetime | None = None) -> bool:
        """True once ``now`` has reached ``expires_at``."""
        return (now or datetime.now(UTC)) >= self.expires_at

    def is_revoked(self) -> bool:
        return self.revoked_at is not None

    def is_active(self, now: datetime | None = None) -> bool:
        """Active means not revoked and not yet expired.

        Args:
            now: Observation time (defaults to current UTC time).

        Returns:
            True if the token can still be redeemed.
        """
        return not self.is_revoked() and not self.is_expired(now)
