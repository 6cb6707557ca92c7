"""Data transfer objects returned by handlers."""

from tasker.application.dtos.auth_dtos import AuthTokens
from tasker.application.dtos.task_dtos import PagedResult, TaskDto, TaskStats

__all__ = ["AuthTokens", "PagedResult", "TaskDto", "TaskStats"]
