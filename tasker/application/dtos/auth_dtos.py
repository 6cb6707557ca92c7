"""Authentication DTOs."""

from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class AuthTokens:
    """Token pair returned by Register, Login and Refresh.

    The refresh token is handed out exactly once, here. It is excluded from
    repr so it never ends up in logs.

    Attributes:
        access_token: Signed JWT.
        refresh_token: Opaque refresh secret.
        expires_in: Access token lifetime in seconds.
        token_type: Always "bearer".
    """

    access_token: str = field(repr=False)
    refresh_token: str = field(repr=False)
    expires_in: int
    token_type: str = "bearer"
