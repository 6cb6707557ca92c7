"""Factories for infrastructure adapters.

Each factory takes the Settings it needs explicitly. ``build_container``
calls each one once.
"""

from collections.abc import Callable
from typing import Any

from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncSession

from tasker.core.config import Settings
from tasker.domain.protocols.critical_event_sink_protocol import (
    CriticalEventSinkProtocol,
)
from tasker.domain.protocols.logger_protocol import LoggerProtocol
from tasker.infrastructure.audit import (
    DatabaseCriticalEventSink,
    LoggingCriticalEventSink,
)
from tasker.infrastructure.logging import ConsoleAdapter
from tasker.infrastructure.persistence.database import Database
from tasker.infrastructure.security import (
    BcryptPasswordService,
    JWTService,
    RefreshTokenService,
)

AuditSinkFactory = Callable[[AsyncSession], CriticalEventSinkProtocol]


def create_logger(settings: Settings) -> LoggerProtocol:
    """Human-readable logs in development, JSON everywhere else."""
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    ).bind(app=settings.app_name)


def create_database(settings: Settings) -> Database:
    return Database(settings.database_url, echo=settings.db_echo)


def create_redis(settings: Settings) -> "Redis[Any]":
    return Redis.from_url(settings.redis_url, decode_responses=True)


def create_password_service(settings: Settings) -> BcryptPasswordService:
    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


def create_token_service(settings: Settings) -> JWTService:
    return JWTService(
        secret_key=settings.jwt_secret_key,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        expiration_minutes=settings.access_token_expire_minutes,
        leeway_seconds=settings.clock_skew_seconds,
    )


def create_refresh_token_service(settings: Settings) -> RefreshTokenService:
    return RefreshTokenService(expiration_days=settings.refresh_token_expire_days)


def create_audit_sink_factory(
    settings: Settings, logger: LoggerProtocol
) -> AuditSinkFactory:
    """Select the critical event sink configured in ``critical_event_sink``.

    The database sink is built per dispatch around its session; the logging
    sink is shared.
    """
    if settings.critical_event_sink == "log":
        return shared_audit_sink(LoggingCriticalEventSink(logger))
    return DatabaseCriticalEventSink


def shared_audit_sink(sink: CriticalEventSinkProtocol) -> AuditSinkFactory:
    """Factory that hands the same sink to every dispatch."""

    def factory(session: AsyncSession) -> CriticalEventSinkProtocol:
        return sink

    return factory
