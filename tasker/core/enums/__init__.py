"""Core enums shared across layers."""

from tasker.core.enums.environment import Environment
from tasker.core.enums.error_code import ErrorCode

__all__ = ["Environment", "ErrorCode"]
