"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol (structural typing, no inheritance).

Security:
    - Adaptive cost factor (10-20, configured via Settings.bcrypt_rounds)
    - Random salt per hash
    - bcrypt only considers the first 72 bytes; longer passwords are
      rejected by request validation before they get here
"""

import bcrypt


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        password_service = BcryptPasswordService(cost_factor=settings.bcrypt_rounds)
        password_hash = password_service.hash_password("Secret1!")
        password_service.verify_password("Secret1!", password_hash)  # True
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor. Each +1 doubles computation time.

        Raises:
            ValueError: If cost factor is outside 10-20.
        """
        if cost_factor < 10:
            msg = "Cost factor must be at least 10 for security"
            raise ValueError(msg)
        if cost_factor > 20:
            msg = "Cost factor above 20 is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Returns:
            Hashed password string (bcrypt format: $2b$<cost>$...).
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True if password matches hash, False otherwise (including a
            malformed stored hash).
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except ValueError:
            return False
