"""Issues an access + refresh token pair and persists the refresh record.

Used by Register, Login and Refresh so the three paths cannot drift apart.
The raw refresh secret leaves this class exactly once, inside AuthTokens.
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from tasker.application.dtos.auth_dtos import AuthTokens
from tasker.domain.entities.refresh_token import RefreshToken
from tasker.domain.entities.user import User
from tasker.domain.protocols.refresh_token_repository import RefreshTokenRepository
from tasker.domain.protocols.refresh_token_service_protocol import (
    RefreshTokenServiceProtocol,
)
from tasker.domain.protocols.token_generation_protocol import TokenGenerationProtocol


class AuthTokenIssuer:
    """Session-scoped token pair issuer.

    Attributes:
        _token_service: Access token (JWT) generator.
        _refresh_token_service: Opaque secret generator and hasher.
        _refresh_token_repo: Store for the hashed refresh record.
    """

    def __init__(
        self,
        token_service: TokenGenerationProtocol,
        refresh_token_service: RefreshTokenServiceProtocol,
        refresh_token_repo: RefreshTokenRepository,
    ) -> None:
        self._token_service = token_service
        self._refresh_token_service = refresh_token_service
        self._refresh_token_repo = refresh_token_repo

    async def issue(
        self,
        user: User,
        *,
        user_agent: str | None = None,
        ip_address: str | None = None,
    ) -> AuthTokens:
        """Issue a fresh pair for ``user``.

        Args:
            user: Token subject.
            user_agent: Optional client metadata for the refresh record.
            ip_address: Optional client metadata for the refresh record.

        Returns:
            AuthTokens with the only copy of the raw refresh secret.
        """
        access_token = self._token_service.generate_access_token(
            user_id=user.id, email=user.email
        )
        refresh_token = self._refresh_token_service.generate_token()

        await self._refresh_token_repo.save(
            RefreshToken(
                id=uuid7(),
                user_id=user.id,
                token_hash=self._refresh_token_service.hash_token(refresh_token),
                created_at=datetime.now(UTC),
                expires_at=self._refresh_token_service.calculate_expiration(),
                user_agent=user_agent,
                ip_address=ip_address,
            )
        )

        return AuthTokens(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_in=self._token_service.expires_in,
        )
