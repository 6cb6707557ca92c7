"""Request base types.

Every command and query is a frozen, keyword-only dataclass deriving from
``Command[R]`` or ``Query[R]``, where ``R`` is the value its handler produces.
Commands without a result use ``Command[None]``.

Example:
    @dataclass(frozen=True, kw_only=True)
    class DeleteTaskItem(Command[None]):
        id: UUID

The base classes carry no fields; they only mark a type as dispatchable so
the registry can check at startup that every request has a handler.
"""

from typing import Protocol

from tasker.core.errors import DomainError
from tasker.core.result import Result


class Command[R]:
    """Marker base for state-changing requests producing ``R``."""

    __slots__ = ()


class Query[R]:
    """Marker base for read-only requests producing ``R``."""

    __slots__ = ()


class RequestHandler[T, R](Protocol):
    """Handles exactly one request type."""

    async def handle(self, request: T) -> Result[R, DomainError]:
        ...


def iter_request_types(module_prefix: str = "") -> list[type]:
    """Request classes currently defined under a module prefix.

    Walks the ``Command``/``Query`` subclass trees. Only classes whose
    modules have been imported are visible, which is why the registry module
    imports every command and query module.

    Args:
        module_prefix: Only include classes whose module starts with this.

    Returns:
        Request classes sorted by qualified name.
    """
    found: set[type] = set()
    pending: list[type] = [Command, Query]
    while pending:
        base = pending.pop()
        for subclass in base.__subclasses__():
            if subclass not in found:
                found.add(subclass)
                pending.append(subclass)
    selected = [cls for cls in found if cls.__module__.startswith(module_prefix)]
    return sorted(selected, key=lambda cls: f"{cls.__module__}.{cls.__qualname__}")


def is_command(request_type: type) -> bool:
    return issubclass(request_type, Command)


def is_query(request_type: type) -> bool:
    return issubclass(request_type, Query)
