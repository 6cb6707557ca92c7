"""Token lifecycle scenarios across Register, Login, Refresh and Logout.

Uses in-memory repositories with real JWT, refresh token and bcrypt services
so the hashes, expiries and claims are the ones production would produce.

Scenarios:
- Register then refresh rotates the pair; the old secret is dead
- Reusing a rotated secret fails
- Two concurrent refreshes of one secret: exactly one succeeds
- Expired secrets are rejected and stay unrevoked
- Login keeps other sessions valid
- Logout is idempotent and ends the chain
"""

import asyncio
from dataclasses import replace
from datetime import UTC, datetime, timedelta

import pytest

from tasker.application.commands.auth_commands import (
    LoginUser,
    LogoutUser,
    RefreshAccessToken,
    RegisterUser,
)
from tasker.application.commands.handlers.login_user_handler import LoginUserHandler
from tasker.application.commands.handlers.logout_user_handler import (
    LogoutUserHandler,
)
from tasker.application.commands.handlers.refresh_access_token_handler import (
    RefreshAccessTokenHandler,
)
from tasker.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from tasker.application.errors import AuthErrors
from tasker.application.services.auth_token_issuer import AuthTokenIssuer
from tasker.core.result import Failure, Success
from tasker.infrastructure.security import BcryptPasswordService
from tests.fakes import InMemoryRefreshTokenRepository, InMemoryUserRepository

PASSWORD = "Correct-Horse-1"


class AuthHarness:
    """Wires the four auth handlers to shared in-memory stores."""

    def __init__(self, jwt_service, refresh_token_service, logger) -> None:
        self.users = InMemoryUserRepository()
        self.refresh_tokens = InMemoryRefreshTokenRepository()
        self.jwt_service = jwt_service
        self.refresh_token_service = refresh_token_service
        password_service = BcryptPasswordService(cost_factor=10)
        issuer = AuthTokenIssuer(
            token_service=jwt_service,
            refresh_token_service=refresh_token_service,
            refresh_token_repo=self.refresh_tokens,
        )
        self.register = RegisterUserHandler(
            self.users, password_service, issuer, logger
        )
        self.login = LoginUserHandler(self.users, password_service, issuer, logger)
        self.refresh = RefreshAccessTokenHandler(
            self.refresh_tokens, refresh_token_service, self.users, issuer, logger
        )
        self.logout = LogoutUserHandler(
            self.refresh_tokens, refresh_token_service, logger
        )

    def record_for(self, secret: str):
        return self.refresh_tokens.tokens[self.refresh_token_service.hash_token(secret)]


@pytest.fixture
def auth(jwt_service, refresh_token_service, mock_logger) -> AuthHarness:
    return AuthHarness(jwt_service, refresh_token_service, mock_logger)


async def register(auth: AuthHarness, email: str = "ada@example.com"):
    result = await auth.register.handle(RegisterUser(email=email, password=PASSWORD))
    assert isinstance(result, Success)
    return result.value


@pytest.mark.unit
class TestRegistration:
    async def test_register_issues_valid_access_token(self, auth):
        tokens = await register(auth)

        claims = auth.jwt_service.validate_access_token(tokens.access_token)
        assert isinstance(claims, Success)
        assert claims.value["email"] == "ada@example.com"
        assert tokens.expires_in == 900
        assert tokens.token_type == "bearer"

    async def test_register_stores_only_hash_of_refresh_secret(self, auth):
        tokens = await register(auth)

        record = auth.record_for(tokens.refresh_token)
        assert record.token_hash != tokens.refresh_token
        assert len(record.token_hash) == 64
        assert record.is_active(datetime.now(UTC))

    async def test_duplicate_email_case_insensitive(self, auth):
        await register(auth, "ada@example.com")

        result = await auth.register.handle(
            RegisterUser(email="ADA@EXAMPLE.COM", password=PASSWORD)
        )

        assert result == Failure(error=AuthErrors.USER_ALREADY_EXISTS)
        assert len(auth.users.users) == 1


@pytest.mark.unit
class TestRefreshRotation:
    async def test_refresh_returns_new_pair_and_revokes_old(self, auth):
        tokens = await register(auth)

        result = await auth.refresh.handle(
            RefreshAccessToken(refresh_token=tokens.refresh_token)
        )

        assert isinstance(result, Success)
        assert result.value.refresh_token != tokens.refresh_token
        assert auth.record_for(tokens.refresh_token).is_revoked()
        assert auth.record_for(result.value.refresh_token).is_active()

    async def test_rotated_secret_cannot_be_reused(self, auth):
        tokens = await register(auth)
        await auth.refresh.handle(RefreshAccessToken(refresh_token=tokens.refresh_token))

        replay = await auth.refresh.handle(
            RefreshAccessToken(refresh_token=tokens.refresh_token)
        )

        assert replay == Failure(error=AuthErrors.INVALID_REFRESH_TOKEN)

    async def test_unknown_secret_rejected(self, auth):
        await register(auth)

        result = await auth.refresh.handle(RefreshAccessToken(refresh_token="forged"))

        assert result == Failure(error=AuthErrors.INVALID_REFRESH_TOKEN)

    async def test_concurrent_refresh_only_one_succeeds(self, auth):
        tokens = await register(auth)
        command = RefreshAccessToken(refresh_token=tokens.refresh_token)

        results = await asyncio.gather(
            auth.refresh.handle(command), auth.refresh.handle(command)
        )

        successes = [r for r in results if isinstance(r, Success)]
        failures = [r for r in results if isinstance(r, Failure)]
        assert len(successes) == 1
        assert failures == [Failure(error=AuthErrors.INVALID_REFRESH_TOKEN)]
        assert len(auth.refresh_tokens.active_tokens(datetime.now(UTC))) == 1

    async def test_expired_secret_rejected_and_not_revoked(self, auth):
        tokens = await register(auth)
        record = auth.record_for(tokens.refresh_token)
        expired = replace(record, expires_at=datetime.now(UTC) - timedelta(seconds=1))
        auth.refresh_tokens.tokens[record.token_hash] = expired

        result = await auth.refresh.handle(
            RefreshAccessToken(refresh_token=tokens.refresh_token)
        )

        assert result == Failure(error=AuthErrors.INVALID_REFRESH_TOKEN)
        assert auth.record_for(tokens.refresh_token).revoked_at is None

    async def test_rotation_chain_keeps_single_active_token(self, auth):
        tokens = await register(auth)
        current = tokens.refresh_token

        for _ in range(3):
            result = await auth.refresh.handle(RefreshAccessToken(refresh_token=current))
            assert isinstance(result, Success)
            current = result.value.refresh_token

        assert len(auth.refresh_tokens.tokens) == 4
        active = auth.refresh_tokens.active_tokens(datetime.now(UTC))
        assert [t.token_hash for t in active] == [
            auth.refresh_token_service.hash_token(current)
        ]


@pytest.mark.unit
class TestLoginAndLogout:
    async def test_login_keeps_existing_sessions(self, auth):
        first = await register(auth)

        result = await auth.login.handle(
            LoginUser(email="Ada@Example.com", password=PASSWORD)
        )

        assert isinstance(result, Success)
        assert auth.record_for(first.refresh_token).is_active()
        assert auth.record_for(result.value.refresh_token).is_active()

    async def test_login_wrong_password(self, auth):
        await register(auth)

        result = await auth.login.handle(
            LoginUser(email="ada@example.com", password="wrong")
        )

        assert result == Failure(error=AuthErrors.INVALID_CREDENTIALS)

    async def test_logout_is_idempotent(self, auth):
        tokens = await register(auth)
        command = LogoutUser(refresh_token=tokens.refresh_token)

        first = await auth.logout.handle(command)
        second = await auth.logout.handle(command)

        assert first == Success(value=True)
        assert second == Success(value=False)

    async def test_refresh_after_logout_fails(self, auth):
        tokens = await register(auth)
        await auth.logout.handle(LogoutUser(refresh_token=tokens.refresh_token))

        result = await auth.refresh.handle(
            RefreshAccessToken(refresh_token=tokens.refresh_token)
        )

        assert result == Failure(error=AuthErrors.INVALID_REFRESH_TOKEN)
