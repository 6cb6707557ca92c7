"""Configuration errors of the dispatch runtime.

These are programmer errors. They are raised (never returned in a Result),
surface at startup or on first use, and are never retried.
"""


class HandlerConfigurationError(Exception):
    """Registration table is inconsistent (missing, duplicate or mismatched handler)."""


class HandlerNotRegisteredError(HandlerConfigurationError):
    """A request was dispatched whose type has no registered handler."""

    def __init__(self, request_type: type) -> None:
        super().__init__(f"No handler registered for {request_type.__qualname__}")
        self.request_type = request_type
