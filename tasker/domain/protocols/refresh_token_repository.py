"""RefreshTokenRepository protocol (port).

Refresh token records are keyed by the hash of the opaque secret. Revocation
must be a single conditional write so two concurrent redemptions of the same
secret cannot both succeed.
"""

from datetime import datetime
from typing import Protocol

from tasker.domain.entities.refresh_token import RefreshToken


class RefreshTokenRepository(Protocol):
    """Refresh token persistence operations."""

    async def save(self, token: RefreshToken) -> None:
        """Persist a newly issued token record."""
        ...

    async def find_by_token_hash(self, token_hash: str) -> RefreshToken | None:
        """Find a record by hash regardless of its state.

        Args:
            token_hash: Hash of the opaque secret.

        Returns:
            RefreshToken if present, None otherwise.
        """
        ...

    async def revoke_active(
        self, token_hash: str, now: datetime
    ) -> RefreshToken | None:
        """Atomically revoke the active record with this hash.

        Implementations set ``revoked_at = now`` only where the record is
        unrevoked and ``expires_at > now``, in one conditional statement.

        Args:
            token_hash: Hash of the presented secret.
            now: Revocation and expiry reference time.

        Returns:
            The revoked record, or None if no active record matched
            (unknown, expired and already revoked are indistinguishable).
        """
        ...
