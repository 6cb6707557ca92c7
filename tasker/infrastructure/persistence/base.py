"""Base model and mixins for all database entities.

This module provides:
- UTCDateTime: timezone-aware DateTime that always round-trips as UTC
- BaseModel: Base class for ALL models (provides id, created_at)
- BaseMutableModel: Base for mutable models (adds updated_at)

Domain entities never inherit from these; repositories map between them.

Architecture:
    BaseModel (id, created_at)
        ├── BaseMutableModel (+ updated_at)
        │   └── TaskItem
        ├── User
        ├── RefreshToken (only revoked_at ever changes)
        └── CriticalEvent (append-only)
"""

from datetime import UTC, datetime
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.engine import Dialect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator
from uuid_extensions import uuid7


class UTCDateTime(TypeDecorator[datetime]):
    """DateTime column that stores UTC and always returns aware datetimes.

    Backends without timezone support (SQLite) hand back naive values; those
    are interpreted as UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(
        self, value: datetime | None, dialect: Dialect
    ) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            raise ValueError("Naive datetime passed to a UTC column")
        return value.astimezone(UTC)

    def process_result_value(
        self, value: datetime | None, dialect: Dialect
    ) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides:
    - id: UUID primary key (UUIDv7, generated client-side)
    - created_at: Timestamp when record was created (UTC)
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class BaseMutableModel(BaseModel):
    """Base class for mutable database models.

    Adds updated_at, refreshed by the database on UPDATE unless the
    repository sets it explicitly.
    """

    __abstract__ = True

    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
