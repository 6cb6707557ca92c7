"""RefreshAccessToken command handler (refresh token rotation).

Flow:
1. Hash the presented secret
2. Conditionally revoke the matching ACTIVE record (single UPDATE)
3. If nothing was revoked -> Failure(INVALID_REFRESH_TOKEN)
4. Load the owning user and issue a new pair in the same unit of work

Step 2 is the only guard against double redemption: of two concurrent
requests with the same secret, only one UPDATE can match the active row.
A rejected secret may be a replay of an already rotated token, so it is
logged as a warning for operators (never with token material).
"""

from datetime import UTC, datetime

from tasker.application.commands.auth_commands import RefreshAccessToken
from tasker.application.dtos.auth_dtos import AuthTokens
from tasker.application.errors import AuthErrors
from tasker.application.services.auth_token_issuer import AuthTokenIssuer
from tasker.core.errors import DomainError
from tasker.core.result import Failure, Result, Success
from tasker.domain.protocols.logger_protocol import LoggerProtocol
from tasker.domain.protocols.refresh_token_repository import RefreshTokenRepository
from tasker.domain.protocols.refresh_token_service_protocol import (
    RefreshTokenServiceProtocol,
)
from tasker.domain.protocols.user_repository import UserRepository


class RefreshAccessTokenHandler:
    """Handler for refresh token rotation."""

    def __init__(
        self,
        refresh_token_repo: RefreshTokenRepository,
        refresh_token_service: RefreshTokenServiceProtocol,
        user_repo: UserRepository,
        token_issuer: AuthTokenIssuer,
        logger: LoggerProtocol,
    ) -> None:
        self._refresh_token_repo = refresh_token_repo
        self._refresh_token_service = refresh_token_service
        self._user_repo = user_repo
        self._token_issuer = token_issuer
        self._logger = logger

    async def handle(
        self, cmd: RefreshAccessToken
    ) -> Result[AuthTokens, DomainError]:
        """Rotate the presented refresh token.

        Returns:
            Success(AuthTokens) with a new pair, or
            Failure(AuthErrors.INVALID_REFRESH_TOKEN) for unknown, expired
            and revoked tokens alike.
        """
        token_hash = self._refresh_token_service.hash_token(cmd.refresh_token)
        revoked = await self._refresh_token_repo.revoke_active(
            token_hash, datetime.now(UTC)
        )

        if revoked is None:
            self._logger.warning("refresh_token_rejected")
            return Failure(error=AuthErrors.INVALID_REFRESH_TOKEN)

        user = await self._user_repo.find_by_id(revoked.user_id)
        if user is None:
            self._logger.warning(
                "refresh_token_owner_missing", token_id=str(revoked.id)
            )
            return Failure(error=AuthErrors.INVALID_REFRESH_TOKEN)

        tokens = await self._token_issuer.issue(
            user, user_agent=revoked.user_agent, ip_address=revoked.ip_address
        )
        self._logger.info(
            "refresh_token_rotated",
            user_id=str(user.id),
            previous_token_id=str(revoked.id),
        )
        return Success(value=tokens)
