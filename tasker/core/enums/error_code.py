"""Machine-readable error codes.

Codes follow ENTITY_ACTION_REASON naming. Values are stable identifiers that
callers may map to client-visible responses.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes."""

    # Validation
    VALIDATION_FAILED = "validation_failed"

    # Resources
    TASK_NOT_FOUND = "task_not_found"

    # Conflicts
    USER_ALREADY_EXISTS = "user_already_exists"

    # Authentication
    INVALID_CREDENTIALS = "invalid_credentials"
    TOKEN_INVALID = "token_invalid"
