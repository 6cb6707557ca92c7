"""Domain protocols (ports).

Infrastructure adapters satisfy these structurally; none of them inherit
from the protocols.
"""

from tasker.domain.protocols.critical_event_sink_protocol import (
    CriticalEventSinkProtocol,
)
from tasker.domain.protocols.logger_protocol import LoggerProtocol
from tasker.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from tasker.domain.protocols.realtime_notifier_protocol import (
    RealtimeNotifierProtocol,
)
from tasker.domain.protocols.refresh_token_repository import RefreshTokenRepository
from tasker.domain.protocols.refresh_token_service_protocol import (
    RefreshTokenServiceProtocol,
)
from tasker.domain.protocols.task_item_repository import (
    TaskItemRepository,
    TaskListCriteria,
    TaskSortKey,
)
from tasker.domain.protocols.token_generation_protocol import TokenGenerationProtocol
from tasker.domain.protocols.user_repository import UserRepository

__all__ = [
    "CriticalEventSinkProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "RealtimeNotifierProtocol",
    "RefreshTokenRepository",
    "RefreshTokenServiceProtocol",
    "TaskItemRepository",
    "TaskListCriteria",
    "TaskSortKey",
    "TokenGenerationProtocol",
    "UserRepository",
]
