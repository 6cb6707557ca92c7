"""Core errors package.

Usage:
    from tasker.core.errors import DomainError, NotFoundError, ValidationFailedError
"""

from tasker.core.errors.common_errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
)
from tasker.core.errors.domain_error import DomainError
from tasker.core.errors.validation_failed_error import (
    FieldFailure,
    ValidationFailedError,
)

__all__ = [
    "DomainError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "FieldFailure",
    "ValidationFailedError",
]
