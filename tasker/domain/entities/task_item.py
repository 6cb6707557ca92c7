"""Task item aggregate."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from tasker.domain.enums import Priority, TaskStatus


@dataclass(slots=True, kw_only=True)
class TaskItem:
    """A unit of work tracked by the application.

    Attributes:
        id: Task identifier (UUIDv7).
        title: Short title, at most 200 characters.
        description: Optional long description, at most 2000 characters.
        priority: Low, Medium or High.
        status: Workflow state.
        due_date: Optional deadline.
        created_at: Creation time.
        updated_at: Last modification time.
    """

    id: UUID
    title: str
    description: str | None
    priority: Priority
    status: TaskStatus
    due_date: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        *,
        title: str,
        description: str | None,
        priority: Priority,
        due_date: datetime | None,
    ) -> "TaskItem":
        """Start a new task in Pending state.

        Returns:
            New TaskItem with both timestamps set to now.
        """
        now = datetime.now(UTC)
        return cls(
            id=uuid7(),
            title=title,
            description=description,
            priority=priority,
            status=TaskStatus.PENDING,
            due_date=due_date,
            created_at=now,
            updated_at=now,
        )

    def update(
        self,
        *,
        title: str,
        description: str | None,
        priority: Priority,
        status: TaskStatus,
        due_date: datetime | None,
    ) -> Priority:
        """Replace editable fields and bump ``updated_at``.

        Returns:
            The priority the task had before the update.
        """
        previous_priority = self.priority
        self.title = title
        self.description = description
        self.priority = priority
        self.status = status
        self.due_date = due_date
        self.updated_at = datetime.now(UTC)
        return previous_priority

    @property
    def is_high_priority(self) -> bool:
        return self.priority is Priority.HIGH
