"""Unit tests for the authentication command handlers.

Tests cover:
- RegisterUser: success, email normalization, duplicate email
- LoginUser: success, unknown email and wrong password are indistinguishable
- RefreshAccessToken: rotation, rejected token, missing owner
- LogoutUser: revoked / nothing to revoke

Architecture:
- Handlers built directly with mocked protocols
- AuthTokenIssuer mocked; its own behaviour is covered separately
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

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
from tasker.application.dtos import AuthTokens
from tasker.application.errors import AuthErrors
from tasker.core.enums import ErrorCode
from tasker.core.result import Failure, Success
from tasker.domain.entities.refresh_token import RefreshToken
from tasker.domain.entities.user import User


def create_user(email: str = "ada@example.com") -> User:
    return User(
        id=uuid7(),
        email=email,
        password_hash="stored_hash",
        created_at=datetime.now(UTC),
    )


def create_revoked_record(user_id, **overrides) -> RefreshToken:
    now = datetime.now(UTC)
    values = {
        "id": uuid7(),
        "user_id": user_id,
        "token_hash": "a" * 64,
        "created_at": now - timedelta(days=1),
        "expires_at": now + timedelta(days=13),
        "revoked_at": now,
        "user_agent": "pytest",
        "ip_address": "127.0.0.1",
    }
    values.update(overrides)
    return RefreshToken(**values)


@pytest.fixture
def tokens() -> AuthTokens:
    return AuthTokens(access_token="access", refresh_token="refresh", expires_in=900)


@pytest.fixture
def token_issuer(tokens) -> AsyncMock:
    issuer = AsyncMock()
    issuer.issue.return_value = tokens
    return issuer


@pytest.mark.unit
class TestRegisterUserHandler:
    @pytest.fixture
    def handler_parts(self, token_issuer, mock_logger):
        user_repo = AsyncMock()
        user_repo.find_by_email.return_value = None
        user_repo.save.return_value = True
        password_service = Mock()
        password_service.hash_password.return_value = "bcrypt_hash"
        handler = RegisterUserHandler(
            user_repo=user_repo,
            password_service=password_service,
            token_issuer=token_issuer,
            logger=mock_logger,
        )
        return handler, user_repo, password_service

    async def test_register_returns_tokens(self, handler_parts, tokens):
        handler, _, _ = handler_parts

        result = await handler.handle(
            RegisterUser(email="ada@example.com", password="Secret1!")
        )

        assert result == Success(value=tokens)

    async def test_register_saves_normalized_email_and_hash(self, handler_parts):
        handler, user_repo, password_service = handler_parts

        await handler.handle(RegisterUser(email="  Ada@Example.COM ", password="Secret1!"))

        saved: User = user_repo.save.await_args.args[0]
        assert saved.email == "ada@example.com"
        assert saved.password_hash == "bcrypt_hash"
        password_service.hash_password.assert_called_once_with("Secret1!")

    async def test_register_issues_tokens_with_client_metadata(
        self, handler_parts, token_issuer
    ):
        handler, user_repo, _ = handler_parts

        await handler.handle(
            RegisterUser(
                email="ada@example.com",
                password="Secret1!",
                user_agent="pytest",
                ip_address="10.0.0.1",
            )
        )

        saved = user_repo.save.await_args.args[0]
        token_issuer.issue.assert_awaited_once_with(
            saved, user_agent="pytest", ip_address="10.0.0.1"
        )

    async def test_duplicate_email_returns_conflict(self, handler_parts, token_issuer):
        handler, user_repo, _ = handler_parts
        user_repo.find_by_email.return_value = create_user()

        result = await handler.handle(
            RegisterUser(email="ADA@example.com", password="Secret1!")
        )

        assert result == Failure(error=AuthErrors.USER_ALREADY_EXISTS)
        assert result.error.code == ErrorCode.USER_ALREADY_EXISTS
        assert result.error.message == "User with this email already exists"
        user_repo.save.assert_not_awaited()
        token_issuer.issue.assert_not_awaited()

    async def test_email_taken_after_lookup_returns_conflict(
        self, handler_parts, token_issuer
    ):
        handler, user_repo, _ = handler_parts
        user_repo.save.return_value = False

        result = await handler.handle(
            RegisterUser(email="ada@example.com", password="Secret1!")
        )

        assert result == Failure(error=AuthErrors.USER_ALREADY_EXISTS)
        token_issuer.issue.assert_not_awaited()


@pytest.mark.unit
class TestLoginUserHandler:
    @pytest.fixture
    def user(self):
        return create_user()

    @pytest.fixture
    def handler_parts(self, user, token_issuer, mock_logger):
        user_repo = AsyncMock()
        user_repo.find_by_email.return_value = user
        password_service = Mock()
        password_service.verify_password.return_value = True
        handler = LoginUserHandler(
            user_repo=user_repo,
            password_service=password_service,
            token_issuer=token_issuer,
            logger=mock_logger,
        )
        return handler, user_repo, password_service

    async def test_login_returns_tokens(self, handler_parts, tokens, user, token_issuer):
        handler, _, password_service = handler_parts

        result = await handler.handle(
            LoginUser(email="ada@example.com", password="Secret1!")
        )

        assert result == Success(value=tokens)
        password_service.verify_password.assert_called_once_with(
            "Secret1!", "stored_hash"
        )
        token_issuer.issue.assert_awaited_once_with(
            user, user_agent=None, ip_address=None
        )

    async def test_unknown_email_and_wrong_password_fail_identically(
        self, handler_parts, token_issuer
    ):
        handler, user_repo, password_service = handler_parts

        password_service.verify_password.return_value = False
        wrong_password = await handler.handle(
            LoginUser(email="ada@example.com", password="nope")
        )
        user_repo.find_by_email.return_value = None
        unknown_email = await handler.handle(
            LoginUser(email="ghost@example.com", password="nope")
        )

        assert wrong_password == unknown_email
        assert wrong_password == Failure(error=AuthErrors.INVALID_CREDENTIALS)
        assert wrong_password.error.message == "Invalid email or password"
        token_issuer.issue.assert_not_awaited()


@pytest.mark.unit
class TestRefreshAccessTokenHandler:
    @pytest.fixture
    def user(self):
        return create_user()

    @pytest.fixture
    def handler_parts(self, user, token_issuer, mock_logger):
        refresh_token_repo = AsyncMock()
        refresh_token_repo.revoke_active.return_value = create_revoked_record(user.id)
        refresh_token_service = Mock()
        refresh_token_service.hash_token.return_value = "a" * 64
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = user
        handler = RefreshAccessTokenHandler(
            refresh_token_repo=refresh_token_repo,
            refresh_token_service=refresh_token_service,
            user_repo=user_repo,
            token_issuer=token_issuer,
            logger=mock_logger,
        )
        return handler, refresh_token_repo, user_repo

    async def test_rotation_revokes_and_issues_new_pair(
        self, handler_parts, tokens, user, token_issuer
    ):
        handler, refresh_token_repo, _ = handler_parts

        result = await handler.handle(RefreshAccessToken(refresh_token="raw-secret"))

        assert result == Success(value=tokens)
        token_hash, now = refresh_token_repo.revoke_active.await_args.args
        assert token_hash == "a" * 64
        assert now.tzinfo is not None
        token_issuer.issue.assert_awaited_once_with(
            user, user_agent="pytest", ip_address="127.0.0.1"
        )

    async def test_rejected_token_returns_invalid_refresh_token(
        self, handler_parts, token_issuer, mock_logger
    ):
        handler, refresh_token_repo, _ = handler_parts
        refresh_token_repo.revoke_active.return_value = None

        result = await handler.handle(RefreshAccessToken(refresh_token="raw-secret"))

        assert result == Failure(error=AuthErrors.INVALID_REFRESH_TOKEN)
        assert result.error.message == "Invalid or expired refresh token"
        token_issuer.issue.assert_not_awaited()
        mock_logger.warning.assert_called_once_with("refresh_token_rejected")

    async def test_rejection_log_never_contains_secret(self, handler_parts, mock_logger):
        handler, refresh_token_repo, _ = handler_parts
        refresh_token_repo.revoke_active.return_value = None

        await handler.handle(RefreshAccessToken(refresh_token="raw-secret"))

        for call in mock_logger.method_calls:
            assert "raw-secret" not in repr(call)

    async def test_missing_owner_returns_invalid_refresh_token(
        self, handler_parts, token_issuer
    ):
        handler, _, user_repo = handler_parts
        user_repo.find_by_id.return_value = None

        result = await handler.handle(RefreshAccessToken(refresh_token="raw-secret"))

        assert result == Failure(error=AuthErrors.INVALID_REFRESH_TOKEN)
        token_issuer.issue.assert_not_awaited()


@pytest.mark.unit
class TestLogoutUserHandler:
    @pytest.fixture
    def handler_parts(self, mock_logger):
        refresh_token_repo = AsyncMock()
        refresh_token_service = Mock()
        refresh_token_service.hash_token.return_value = "b" * 64
        handler = LogoutUserHandler(
            refresh_token_repo=refresh_token_repo,
            refresh_token_service=refresh_token_service,
            logger=mock_logger,
        )
        return handler, refresh_token_repo

    async def test_logout_active_token_returns_true(self, handler_parts):
        handler, refresh_token_repo = handler_parts
        refresh_token_repo.revoke_active.return_value = create_revoked_record(uuid7())

        result = await handler.handle(LogoutUser(refresh_token="raw-secret"))

        assert result == Success(value=True)
        assert refresh_token_repo.revoke_active.await_args.args[0] == "b" * 64

    async def test_logout_unknown_or_revoked_token_returns_false(self, handler_parts):
        handler, refresh_token_repo = handler_parts
        refresh_token_repo.revoke_active.return_value = None

        result = await handler.handle(LogoutUser(refresh_token="raw-secret"))

        assert result == Success(value=False)
