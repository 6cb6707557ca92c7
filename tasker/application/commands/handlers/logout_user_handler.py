"""LogoutUser command handler.

Idempotent: a second logout with the same token yields Success(False).
"""

from datetime import UTC, datetime

from tasker.application.commands.auth_commands import LogoutUser
from tasker.core.errors import DomainError
from tasker.core.result import Result, Success
from tasker.domain.protocols.logger_protocol import LoggerProtocol
from tasker.domain.protocols.refresh_token_repository import RefreshTokenRepository
from tasker.domain.protocols.refresh_token_service_protocol import (
    RefreshTokenServiceProtocol,
)


class LogoutUserHandler:
    def __init__(
        self,
        refresh_token_repo: RefreshTokenRepository,
        refresh_token_service: RefreshTokenServiceProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._refresh_token_repo = refresh_token_repo
        self._refresh_token_service = refresh_token_service
        self._logger = logger

    async def handle(self, cmd: LogoutUser) -> Result[bool, DomainError]:
        """Revoke the presented token if it is active.

        Returns:
            Success(True) if a record was revoked, Success(False) otherwise.
        """
        revoked = await self._refresh_token_repo.revoke_active(
            self._refresh_token_service.hash_token(cmd.refresh_token),
            datetime.now(UTC),
        )
        if revoked is None:
            return Success(value=False)

        self._logger.info("user_logged_out", user_id=str(revoked.user_id))
        return Success(value=True)
