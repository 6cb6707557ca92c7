"""Authentication commands.

Commands are immutable and carry everything the handler needs. Secrets are
excluded from repr so a logged command never leaks them.
"""

from dataclasses import dataclass, field

from tasker.application.cqrs.requests import Command
from tasker.application.dtos.auth_dtos import AuthTokens


@dataclass(frozen=True, kw_only=True)
class RegisterUser(Command[AuthTokens]):
    """Create an account and sign the user in.

    Attributes:
        email: Email in any case; stored lowercase.
        password: Plaintext password (hashed before storage).
        user_agent: Optional client metadata stored on the refresh token.
        ip_address: Optional client metadata stored on the refresh token.
    """

    email: str
    password: str = field(repr=False)
    user_agent: str | None = None
    ip_address: str | None = None


@dataclass(frozen=True, kw_only=True)
class LoginUser(Command[AuthTokens]):
    """Exchange credentials for a new token pair.

    Other sessions of the same user stay valid.
    """

    email: str
    password: str = field(repr=False)
    user_agent: str | None = None
    ip_address: str | None = None


@dataclass(frozen=True, kw_only=True)
class RefreshAccessToken(Command[AuthTokens]):
    """Rotate a refresh token: revoke it and issue a new pair."""

    refresh_token: str = field(repr=False)


@dataclass(frozen=True, kw_only=True)
class LogoutUser(Command[bool]):
    """Revoke a refresh token. Produces whether a token was revoked."""

    refresh_token: str = field(repr=False)
