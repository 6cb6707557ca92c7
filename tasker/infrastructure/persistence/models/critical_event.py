"""Append-only audit table for critical task events."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tasker.infrastructure.persistence.base import BaseModel, UTCDateTime


class CriticalEvent(BaseModel):
    """One recorded HighPriorityTaskChanged event.

    Rows are inserted only; nothing updates or deletes them.
    """

    __tablename__ = "critical_events"

    event_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, unique=True)

    event_type: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    task_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)

    title: Mapped[str] = mapped_column(String(200), nullable=False)

    priority: Mapped[str] = mapped_column(String(16), nullable=False)

    reason: Mapped[str] = mapped_column(Text, nullable=False)

    occurred_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
