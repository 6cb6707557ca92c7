"""RegisterUser command handler.

Flow:
1. Normalize email and check it is not taken
2. Hash password (bcrypt)
3. Create and save user
4. Issue access + refresh token pair (refresh record persisted)
5. Return Success(tokens)

Duplicate emails return the same ConflictError every time.
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from tasker.application.commands.auth_commands import RegisterUser
from tasker.application.dtos.auth_dtos import AuthTokens
from tasker.application.errors import AuthErrors
from tasker.application.services.auth_token_issuer import AuthTokenIssuer
from tasker.core.errors import DomainError
from tasker.core.result import Failure, Result, Success
from tasker.domain.entities.user import User
from tasker.domain.protocols.logger_protocol import LoggerProtocol
from tasker.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from tasker.domain.protocols.user_repository import UserRepository
from tasker.domain.validators import normalize_email


class RegisterUserHandler:
    """Handler for user registration command."""

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

    async def handle(self, cmd: RegisterUser) -> Result[AuthTokens, DomainError]:
        """Handle user registration command.

        Args:
            cmd: RegisterUser command (already validated).

        Returns:
            Success(AuthTokens) or Failure(AuthErrors.USER_ALREADY_EXISTS).
        """
        email = normalize_email(cmd.email)

        if await self._user_repo.find_by_email(email) is not None:
            return Failure(error=AuthErrors.USER_ALREADY_EXISTS)

        user = User(
            id=uuid7(),
            email=email,
            password_hash=self._password_service.hash_password(cmd.password),
            created_at=datetime.now(UTC),
        )
        # Lost a race with a concurrent registration of the same email.
        if not await self._user_repo.save(user):
            return Failure(error=AuthErrors.USER_ALREADY_EXISTS)

        tokens = await self._token_issuer.issue(
            user, user_agent=cmd.user_agent, ip_address=cmd.ip_address
        )
        self._logger.info("user_registered", user_id=str(user.id))
        return Success(value=tokens)
