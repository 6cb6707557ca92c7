"""Critical event sinks (audit trail for high-priority task changes)."""

from tasker.infrastructure.audit.database_sink import DatabaseCriticalEventSink
from tasker.infrastructure.audit.logging_sink import LoggingCriticalEventSink

__all__ = ["DatabaseCriticalEventSink", "LoggingCriticalEventSink"]
