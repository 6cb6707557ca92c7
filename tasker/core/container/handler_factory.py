"""Handler factory - auto-wire handler dependencies from type hints.

Handlers declare their collaborators as ``__init__`` parameters annotated
with protocol types. The factory maps each annotation to:
- a repository bound to the dispatch's session (REPOSITORY_TYPES)
- a session-scoped application service, built recursively (SESSION_SERVICE_TYPES)
- a Container factory called with the session (SESSION_FACTORY_TYPES)
- an application-scoped component held by the Container (SINGLETON_TYPES)

Usage:
    handler = create_handler(RegisterUserHandler, session, container)
"""

import inspect
from types import UnionType
from typing import TYPE_CHECKING, Any, Union, get_args, get_origin, get_type_hints

from sqlalchemy.ext.asyncio import AsyncSession

from tasker.application.cqrs.errors import HandlerConfigurationError
from tasker.application.event_handlers.high_priority_task_changed_relay import (
    HighPriorityTaskChangedRelay,
)
from tasker.application.services.auth_token_issuer import AuthTokenIssuer
from tasker.infrastructure.persistence.repositories import (
    RefreshTokenRepository,
    TaskItemRepository,
    UserRepository,
)

if TYPE_CHECKING:
    from tasker.core.container import Container

# Repository protocol name -> SQLAlchemy implementation (needs the session)
REPOSITORY_TYPES: dict[str, type] = {
    "UserRepository": UserRepository,
    "RefreshTokenRepository": RefreshTokenRepository,
    "TaskItemRepository": TaskItemRepository,
}

# Application services that depend on session-bound collaborators
SESSION_SERVICE_TYPES: dict[str, type] = {
    "AuthTokenIssuer": AuthTokenIssuer,
    "HighPriorityTaskChangedRelay": HighPriorityTaskChangedRelay,
}

# Protocol name -> Container attribute holding a ``factory(session)``
SESSION_FACTORY_TYPES: dict[str, str] = {
    "CriticalEventSinkProtocol": "audit_sink_factory",
}

# Protocol/class name -> Container attribute
SINGLETON_TYPES: dict[str, str] = {
    "LoggerProtocol": "logger",
    "PasswordHashingProtocol": "password_service",
    "TokenGenerationProtocol": "token_service",
    "RefreshTokenServiceProtocol": "refresh_token_service",
    "RealtimeNotifierProtocol": "notifier",
}


def get_type_name(annotation: Any) -> str:
    """Extract type name from annotation.

    Handles class types, ``X | None`` unions and string forward references.
    """
    if annotation is None:
        return "None"

    if get_origin(annotation) in (Union, UnionType):
        for arg in get_args(annotation):
            if arg is not type(None):
                return get_type_name(arg)
        return "None"

    if isinstance(annotation, type):
        return annotation.__name__
    if isinstance(annotation, str):
        return annotation.split(".")[-1]
    return str(annotation).split(".")[-1].rstrip("'>")


def analyze_handler_dependencies(handler_class: type) -> dict[str, str]:
    """Map ``__init__`` parameter names to dependency type names.

    Args:
        handler_class: Handler (or session service) class to analyze.

    Returns:
        Dict of parameter name to type name, in declaration order.

    Raises:
        HandlerConfigurationError: If a parameter has no usable annotation.
    """
    init_method = handler_class.__init__  # type: ignore[misc]
    try:
        hints = get_type_hints(init_method)
    except NameError as e:
        raise HandlerConfigurationError(
            f"Cannot resolve dependencies of {handler_class.__name__}: {e}"
        ) from e

    dependencies: dict[str, str] = {}
    for name, param in inspect.signature(init_method).parameters.items():
        if name == "self" or param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        if name not in hints:
            raise HandlerConfigurationError(
                f"{handler_class.__name__}.__init__ parameter '{name}' is not annotated"
            )
        dependencies[name] = get_type_name(hints[name])
    return dependencies


def check_handler_dependencies(handler_class: type) -> None:
    """Fail at startup if any dependency of ``handler_class`` is unknown.

    Raises:
        HandlerConfigurationError: Naming the first unresolvable dependency.
    """
    for name, type_name in analyze_handler_dependencies(handler_class).items():
        if type_name in SESSION_SERVICE_TYPES:
            check_handler_dependencies(SESSION_SERVICE_TYPES[type_name])
        elif not (
            type_name in REPOSITORY_TYPES
            or type_name in SESSION_FACTORY_TYPES
            or type_name in SINGLETON_TYPES
        ):
            raise HandlerConfigurationError(
                f"{handler_class.__name__}: no provider for '{name}: {type_name}'"
            )


def create_handler[T](
    handler_class: type[T], session: AsyncSession, container: "Container"
) -> T:
    """Instantiate a handler with all dependencies resolved.

    Args:
        handler_class: Handler class to build.
        session: Unit-of-work session of the current dispatch.
        container: Application-scoped components.

    Returns:
        Handler instance bound to ``session``.
    """
    kwargs: dict[str, Any] = {}
    for name, type_name in analyze_handler_dependencies(handler_class).items():
        if type_name in REPOSITORY_TYPES:
            kwargs[name] = REPOSITORY_TYPES[type_name](session=session)
        elif type_name in SESSION_SERVICE_TYPES:
            kwargs[name] = create_handler(
                SESSION_SERVICE_TYPES[type_name], session, container
            )
        elif type_name in SESSION_FACTORY_TYPES:
            factory = getattr(container, SESSION_FACTORY_TYPES[type_name])
            kwargs[name] = factory(session)
        elif type_name in SINGLETON_TYPES:
            kwargs[name] = getattr(container, SINGLETON_TYPES[type_name])
        else:
            raise HandlerConfigurationError(
                f"{handler_class.__name__}: no provider for '{name}: {type_name}'"
            )
    return handler_class(**kwargs)
