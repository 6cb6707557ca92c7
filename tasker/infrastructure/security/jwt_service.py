"""JWT access token service (adapter).

Implements TokenGenerationProtocol using PyJWT with HMAC-SHA256.

Security:
    - HS256, secret key of at least 256 bits
    - Claims: sub, email, iss, aud, iat, exp, jti
    - Verification checks signature, issuer, audience and expiry with a
      bounded clock-skew leeway (max 30 seconds)
    - Access tokens have no server-side record; lifetime is claim-based
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from tasker.core.enums import ErrorCode
from tasker.core.result import Failure, Result, Success

MAX_LEEWAY_SECONDS = 30


class JWTService:
    """JWT token generation and validation service.

    Usage:
        service = JWTService(
            secret_key=settings.jwt_secret_key,
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
            expiration_minutes=settings.access_token_expire_minutes,
        )
        token = service.generate_access_token(user_id=user.id, email=user.email)
        result = service.validate_access_token(token)
    """

    def __init__(
        self,
        secret_key: str,
        issuer: str,
        audience: str,
        expiration_minutes: int = 15,
        leeway_seconds: int = MAX_LEEWAY_SECONDS,
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: HMAC signing key, at least 32 bytes.
            issuer: Value of the ``iss`` claim.
            audience: Value of the ``aud`` claim.
            expiration_minutes: Token lifetime.
            leeway_seconds: Clock-skew tolerance on verification.

        Raises:
            ValueError: If the key is too short or the leeway exceeds 30s.
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        if not 0 <= leeway_seconds <= MAX_LEEWAY_SECONDS:
            msg = f"Clock skew leeway must be between 0 and {MAX_LEEWAY_SECONDS} seconds"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._issuer = issuer
        self._audience = audience
        self._expiration_minutes = expiration_minutes
        self._leeway = leeway_seconds
        self._algorithm = "HS256"

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds."""
        return self._expiration_minutes * 60

    def generate_access_token(self, user_id: UUID, email: str) -> str:
        """Generate JWT access token.

        Args:
            user_id: Subject of the token.
            email: User's email address.

        Returns:
            JWT access token string (header.payload.signature).
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload = {
            "sub": str(user_id),
            "email": email,
            "iss": self._issuer,
            "aud": self._audience,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate JWT access token and extract payload.

        Returns:
            Success with the claims, or Failure with ``token_invalid`` for any
            bad signature, issuer, audience, expiry or malformed token.
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                audience=self._audience,
                issuer=self._issuer,
                leeway=self._leeway,
                options={"require": ["sub", "exp", "iat", "iss", "aud"]},
            )
        except InvalidTokenError:
            return Failure(error=ErrorCode.TOKEN_INVALID.value)

        return Success(value=payload)
