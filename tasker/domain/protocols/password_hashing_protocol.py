"""Password hashing protocol (port)."""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Salted, adaptive one-way password hashing."""

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password.

        Returns:
            Encoded hash including salt and cost.
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored hash.

        Returns:
            True if the password matches.
        """
        ...
