"""LoginUser command handler.

An unknown email and a wrong password produce the same failure. Existing
sessions of the user are left untouched; a user may hold several active
refresh token chains at once.
"""

from tasker.application.commands.auth_commands import LoginUser
from tasker.application.dtos.auth_dtos import AuthTokens
from tasker.application.errors import AuthErrors
from tasker.application.services.auth_token_issuer import AuthTokenIssuer
from tasker.core.errors import DomainError
from tasker.core.result import Failure, Result, Success
from tasker.domain.protocols.logger_protocol import LoggerProtocol
from tasker.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from tasker.domain.protocols.user_repository import UserRepository


class LoginUserHandler:
    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_issuer: AuthTokenIssuer,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_issuer = token_issuer
        self._logger = logger

    async def handle(self, cmd: LoginUser) -> Result[AuthTokens, DomainError]:
        user = await self._user_repo.find_by_email(cmd.email)
        if user is None or not self._password_service.verify_password(
            cmd.password, user.password_hash
        ):
            self._logger.info("login_failed")
            return Failure(error=AuthErrors.INVALID_CREDENTIALS)

        tokens = await self._token_issuer.issue(
            user, user_agent=cmd.user_agent, ip_address=cmd.ip_address
        )
        self._logger.info("user_logged_in", user_id=str(user.id))
        return Success(value=tokens)
