"""Application-level error constants."""

from tasker.application.errors.auth_errors import AuthErrors
from tasker.application.errors.task_errors import task_not_found

__all__ = ["AuthErrors", "task_not_found"]
