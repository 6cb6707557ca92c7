"""Refresh token service protocol (port)."""

from datetime import datetime
from typing import Protocol


class RefreshTokenServiceProtocol(Protocol):
    """Generates opaque refresh secrets and derives their storage hash."""

    def generate_token(self) -> str:
        """Return a new high-entropy opaque secret."""
        ...

    def hash_token(self, token: str) -> str:
        """Deterministic one-way hash used as the lookup key."""
        ...

    def calculate_expiration(self) -> datetime:
        """Expiry timestamp for a token issued now."""
        ...
