"""SQLAlchemy persistence adapters."""

from tasker.infrastructure.persistence.base import BaseModel, BaseMutableModel
from tasker.infrastructure.persistence.database import Database

__all__ = ["BaseModel", "BaseMutableModel", "Database"]
