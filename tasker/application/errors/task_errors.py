"""Task failures."""

from uuid import UUID

from tasker.core.enums import ErrorCode
from tasker.core.errors import NotFoundError


def task_not_found(task_id: UUID | None) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.TASK_NOT_FOUND,
        message="Task not found",
        resource_type="TaskItem",
        resource_id=str(task_id),
    )
