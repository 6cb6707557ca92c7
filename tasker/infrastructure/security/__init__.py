"""Security adapters: password hashing, access tokens, refresh tokens."""

from tasker.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from tasker.infrastructure.security.jwt_service import JWTService
from tasker.infrastructure.security.refresh_token_service import RefreshTokenService

__all__ = ["BcryptPasswordService", "JWTService", "RefreshTokenService"]
