"""LoggerProtocol definition for structured logging.

Implementations MUST keep logs structured (message + key-value context) and
safe: never log passwords, raw refresh tokens or signing keys.

Usage:
    logger.info("user_registered", user_id=str(user.id))
    request_logger = logger.bind(request_type="RefreshAccessToken")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log diagnostic detail."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log a normal operational event."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a suspicious or degraded condition."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failed operation, optionally with the exception."""
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a system-wide failure."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger that includes ``context`` in every entry."""
        ...
