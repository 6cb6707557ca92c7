"""Access token generation protocol (port)."""

from typing import Any, Protocol
from uuid import UUID

from tasker.core.result import Result


class TokenGenerationProtocol(Protocol):
    """Issues and verifies short-lived signed access tokens."""

    @property
    def expires_in(self) -> int:
        """Access token lifetime in seconds."""
        ...

    def generate_access_token(self, user_id: UUID, email: str) -> str:
        """Issue a signed token for the user.

        Args:
            user_id: Subject of the token.
            email: User email (informational claim).

        Returns:
            Encoded access token.
        """
        ...

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Verify signature, issuer, audience and expiry.

        Returns:
            Success with the claims, or Failure with an error identifier.
        """
        ...
