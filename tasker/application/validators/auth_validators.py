"""Validators for authentication commands."""

from tasker.application.commands.auth_commands import (
    LoginUser,
    LogoutUser,
    RefreshAccessToken,
    RegisterUser,
)
from tasker.application.validators.base import check, is_blank, max_length, required
from tasker.core.errors import FieldFailure
from tasker.domain.validators import validate_email

# bcrypt ignores everything after the first 72 bytes
MAX_PASSWORD_BYTES = 72

# Column sizes of the client metadata stored on refresh tokens
MAX_USER_AGENT_LENGTH = 512
MAX_IP_ADDRESS_LENGTH = 45


def _email_failures(email: str) -> list[FieldFailure]:
    if is_blank(email):
        return [FieldFailure("email", "Email is required")]
    return check("email", email, validate_email, "Email must be a valid email address")


def _client_metadata_failures(request: RegisterUser | LoginUser) -> list[FieldFailure]:
    failures = max_length(
        "user_agent",
        request.user_agent,
        MAX_USER_AGENT_LENGTH,
        f"User agent cannot exceed {MAX_USER_AGENT_LENGTH} characters",
    )
    failures += max_length(
        "ip_address",
        request.ip_address,
        MAX_IP_ADDRESS_LENGTH,
        f"IP address cannot exceed {MAX_IP_ADDRESS_LENGTH} characters",
    )
    return failures


class RegisterUserValidator:
    async def validate(self, request: RegisterUser) -> list[FieldFailure]:
        failures = _email_failures(request.email)
        if not request.password:
            failures.append(FieldFailure("password", "Password is required"))
        elif len(request.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            failures.append(
                FieldFailure("password", "Password cannot exceed 72 bytes")
            )
        failures += _client_metadata_failures(request)
        return failures


class LoginUserValidator:
    async def validate(self, request: LoginUser) -> list[FieldFailure]:
        failures = _email_failures(request.email)
        if not request.password:
            failures.append(FieldFailure("password", "Password is required"))
        failures += _client_metadata_failures(request)
        return failures


class RefreshTokenPresentValidator:
    """Shared by Refresh and Logout: the opaque token must be supplied."""

    async def validate(
        self, request: RefreshAccessToken | LogoutUser
    ) -> list[FieldFailure]:
        return required("refresh_token", request.refresh_token, "Refresh token is required")
