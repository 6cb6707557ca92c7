"""Validators for task commands and queries."""

from datetime import UTC, datetime, timedelta

from tasker.application.commands.task_commands import (
    CreateTaskItem,
    DeleteTaskItem,
    UpdateTaskItem,
)
from tasker.application.queries.task_queries import GetTaskItemsPaged
from tasker.application.validators.base import max_length, member_of, required
from tasker.core.errors import FieldFailure
from tasker.domain.enums import Priority, TaskStatus

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 2000
MAX_PAGE_SIZE = 100

# Due dates up to a day in the past are tolerated for clients in other timezones.
DUE_DATE_GRACE = timedelta(days=1)


class TaskDetailsValidator:
    """Title, description, priority and (for updates) status."""

    async def validate(
        self, request: CreateTaskItem | UpdateTaskItem
    ) -> list[FieldFailure]:
        failures = required("title", request.title, "Title is required")
        failures += max_length(
            "title",
            request.title,
            TITLE_MAX_LENGTH,
            f"Title cannot exceed {TITLE_MAX_LENGTH} characters",
        )
        failures += max_length(
            "description",
            request.description,
            DESCRIPTION_MAX_LENGTH,
            f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters",
        )
        failures += member_of(
            "priority", request.priority, Priority, "Priority must be a valid value"
        )
        if isinstance(request, UpdateTaskItem):
            failures += member_of(
                "status", request.status, TaskStatus, "Status must be a valid value"
            )
        return failures


class TaskDueDateValidator:
    async def validate(
        self, request: CreateTaskItem | UpdateTaskItem
    ) -> list[FieldFailure]:
        if request.due_date is None:
            return []
        if request.due_date.tzinfo is None:
            return [FieldFailure("due_date", "Due date must include a timezone")]
        if request.due_date < datetime.now(UTC) - DUE_DATE_GRACE:
            return [FieldFailure("due_date", "Due date cannot be in the far past")]
        return []


class TaskIdValidator:
    async def validate(
        self, request: UpdateTaskItem | DeleteTaskItem
    ) -> list[FieldFailure]:
        if request.id is None:
            return [FieldFailure("id", "Id is required")]
        return []


class TaskListingValidator:
    async def validate(self, request: GetTaskItemsPaged) -> list[FieldFailure]:
        failures: list[FieldFailure] = []
        if request.page_number < 1:
            failures.append(
                FieldFailure("page_number", "Page number must be at least 1")
            )
        if not 1 <= request.page_size <= MAX_PAGE_SIZE:
            failures.append(
                FieldFailure(
                    "page_size", f"Page size must be between 1 and {MAX_PAGE_SIZE}"
                )
            )
        if request.status is not None:
            failures += member_of(
                "status", request.status, TaskStatus, "Status must be a valid value"
            )
        if request.priority is not None:
            failures += member_of(
                "priority", request.priority, Priority, "Priority must be a valid value"
            )
        return failures
