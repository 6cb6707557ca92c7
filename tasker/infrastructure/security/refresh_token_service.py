"""Refresh token service (adapter).

Generates opaque refresh secrets and the hash that is stored in their place.

Security:
    - 64 random bytes from ``secrets`` (URL-safe base64, ~86 chars)
    - SHA-256 hex digest as the storage and lookup key. The secret already
      carries 512 bits of entropy, so a fast deterministic hash is enough and
      lets the store look tokens up by hash with a unique index.
    - The raw secret is returned once to the caller and never persisted
"""

import hashlib
import secrets
from datetime import UTC, datetime, timedelta


class RefreshTokenService:
    """Opaque refresh token generator and hasher.

    Usage:
        service = RefreshTokenService(expiration_days=settings.refresh_token_expire_days)
        token = service.generate_token()
        token_hash = service.hash_token(token)
        expires_at = service.calculate_expiration()
    """

    TOKEN_BYTES = 64

    def __init__(self, expiration_days: int = 14) -> None:
        if expiration_days <= 0:
            raise ValueError("Refresh token expiration must be positive")
        self._expiration_days = expiration_days

    def generate_token(self) -> str:
        return secrets.token_urlsafe(self.TOKEN_BYTES)

    def hash_token(self, token: str) -> str:
        """Hash a refresh secret for storage.

        Args:
            token: Opaque secret issued to the client.

        Returns:
            64-character lowercase hex digest.
        """
        return hashlib.sha256(token.encode("utf-8")).hexdigest()

    def calculate_expiration(self) -> datetime:
        return datetime.now(UTC) + timedelta(days=self._expiration_days)
