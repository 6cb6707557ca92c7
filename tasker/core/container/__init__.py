"""Composition root.

Everything application-scoped is built once by ``build_container`` from an
explicit Settings object and handed to consumers by reference. There are no
module-level singletons; tests build their own container with overrides.

Usage:
    settings = load_settings()
    container = build_container(settings)
    result = await container.dispatcher.dispatch(LoginUser(email=..., password=...))
    ...
    await container.aclose()
"""

from dataclasses import dataclass, field
from functools import partial
from typing import Any

from redis.asyncio import Redis

from tasker.application.cqrs.computed_views import iter_registrations
from tasker.application.cqrs.dispatcher import Dispatcher
from tasker.application.cqrs.handler_registry import HandlerRegistry
from tasker.application.cqrs.requests import iter_request_types
from tasker.core.config import Settings
from tasker.core.container.handler_factory import (
    check_handler_dependencies,
    create_handler,
)
from tasker.core.container.infrastructure import (
    AuditSinkFactory,
    create_audit_sink_factory,
    create_database,
    create_logger,
    create_password_service,
    create_redis,
    create_refresh_token_service,
    create_token_service,
    shared_audit_sink,
)
from tasker.domain.protocols.critical_event_sink_protocol import (
    CriticalEventSinkProtocol,
)
from tasker.domain.protocols.logger_protocol import LoggerProtocol
from tasker.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from tasker.domain.protocols.realtime_notifier_protocol import (
    RealtimeNotifierProtocol,
)
from tasker.domain.protocols.refresh_token_service_protocol import (
    RefreshTokenServiceProtocol,
)
from tasker.domain.protocols.token_generation_protocol import TokenGenerationProtocol
from tasker.infrastructure.persistence.database import Database
from tasker.infrastructure.realtime.redis_notifier import RedisRealtimeNotifier


@dataclass(kw_only=True)
class Container:
    """Application-scoped components."""

    settings: Settings
    logger: LoggerProtocol
    database: Database
    redis: "Redis[Any] | None"
    password_service: PasswordHashingProtocol
    token_service: TokenGenerationProtocol
    refresh_token_service: RefreshTokenServiceProtocol
    audit_sink_factory: AuditSinkFactory
    notifier: RealtimeNotifierProtocol
    handler_registry: HandlerRegistry = field(init=False)
    dispatcher: Dispatcher = field(init=False)

    async def aclose(self) -> None:
        """Release pooled connections."""
        await self.database.close()
        if self.redis is not None:
            await self.redis.aclose()


def build_handler_registry(container: Container) -> HandlerRegistry:
    """Build and verify the registration table.

    Raises:
        HandlerConfigurationError: On duplicate, missing or unwireable handlers.
    """
    registry = HandlerRegistry()
    for request_class, handler_class, validators in iter_registrations():
        check_handler_dependencies(handler_class)
        registry.register(
            request_class,
            handler_class,
            partial(_build_handler, handler_class, container),
            validators,
        )
    registry.verify(iter_request_types(module_prefix="tasker."))
    return registry


def _build_handler(handler_class: type, container: Container, session: Any) -> Any:
    return create_handler(handler_class, session, container)


def build_container(
    settings: Settings,
    *,
    logger: LoggerProtocol | None = None,
    database: Database | None = None,
    redis_client: "Redis[Any] | None" = None,
    audit_sink: CriticalEventSinkProtocol | None = None,
    notifier: RealtimeNotifierProtocol | None = None,
) -> Container:
    """Construct every application-scoped component.

    Keyword overrides replace the default adapter (used by tests and by
    alternative deployments).

    Args:
        settings: Validated configuration.

    Returns:
        Container with a ready dispatcher.

    Raises:
        HandlerConfigurationError: If the handler registry is inconsistent.
        ValueError: If security settings are rejected by their services.
    """
    logger = logger or create_logger(settings)
    database = database or create_database(settings)
    if notifier is None:
        redis_client = redis_client or create_redis(settings)
        notifier = RedisRealtimeNotifier(redis_client, settings.realtime_channel)
    if audit_sink is not None:
        audit_sink_factory = shared_audit_sink(audit_sink)
    else:
        audit_sink_factory = create_audit_sink_factory(settings, logger)

    container = Container(
        settings=settings,
        logger=logger,
        database=database,
        redis=redis_client,
        password_service=create_password_service(settings),
        token_service=create_token_service(settings),
        refresh_token_service=create_refresh_token_service(settings),
        audit_sink_factory=audit_sink_factory,
        notifier=notifier,
    )
    container.handler_registry = build_handler_registry(container)
    container.dispatcher = Dispatcher(
        registry=container.handler_registry,
        unit_of_work=database.get_session,
        logger=logger,
    )
    logger.info(
        "container_built",
        environment=settings.environment.value,
        handlers=len(container.handler_registry),
    )
    return container


__all__ = ["Container", "build_container", "build_handler_registry"]
