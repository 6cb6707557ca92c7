"""Task priority."""

from enum import Enum


class Priority(str, Enum):
    """Task priority levels, lowest first."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
