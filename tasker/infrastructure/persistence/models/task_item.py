"""Task item database model."""

from datetime import datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from tasker.infrastructure.persistence.base import BaseMutableModel, UTCDateTime


class TaskItem(BaseMutableModel):
    """Task row. Priority and status are stored as their enum values."""

    __tablename__ = "task_items"

    title: Mapped[str] = mapped_column(String(200), nullable=False)

    description: Mapped[str | None] = mapped_column(String(2000), nullable=True)

    priority: Mapped[str] = mapped_column(String(16), nullable=False, index=True)

    status: Mapped[str] = mapped_column(String(16), nullable=False, index=True)

    due_date: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)
