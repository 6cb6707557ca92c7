"""Common error classes used across domains and layers.

Usage:
    return Failure(error=NotFoundError(
        code=ErrorCode.TASK_NOT_FOUND,
        message="Task not found",
        resource_type="TaskItem",
        resource_id=str(task_id),
    ))
"""

from dataclasses import dataclass

from tasker.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (User, TaskItem, ...).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has the conflict.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (invalid credentials, invalid refresh token).

    Messages are deliberately generic so callers cannot tell an unknown
    account or token apart from a wrong password or a revoked token.
    """

    pass
