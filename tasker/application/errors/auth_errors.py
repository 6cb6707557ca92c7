"""Authentication failures.

Messages are deliberately generic so a caller cannot learn whether an email
is registered or whether a refresh token is unknown, expired or revoked.
"""

from tasker.core.enums import ErrorCode
from tasker.core.errors import AuthenticationError, ConflictError


class AuthErrors:
    """Stable auth failure values returned inside ``Failure``."""

    USER_ALREADY_EXISTS = ConflictError(
        code=ErrorCode.USER_ALREADY_EXISTS,
        message="User with this email already exists",
        resource_type="User",
        conflicting_field="email",
    )
    INVALID_CREDENTIALS = AuthenticationError(
        code=ErrorCode.INVALID_CREDENTIALS,
        message="Invalid email or password",
    )
    INVALID_REFRESH_TOKEN = AuthenticationError(
        code=ErrorCode.TOKEN_INVALID,
        message="Invalid or expired refresh token",
    )
