"""Static request-type to handler table.

Built once at startup from COMMAND_REGISTRY and QUERY_REGISTRY. Every rule
is checked when the table is built: one handler per request type, an async
``handle`` accepting that type, async validators. ``verify()`` then checks
that no request type was left without a handler. At call time the only
possible error is dispatching a type that was never registered.
"""

import inspect
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, get_type_hints

from tasker.application.cqrs.errors import (
    HandlerConfigurationError,
    HandlerNotRegisteredError,
)
from tasker.application.cqrs.requests import is_command, is_query


@dataclass(frozen=True, slots=True, kw_only=True)
class HandlerRegistration:
    """One row of the registration table.

    Attributes:
        request_type: Command or query class.
        handler_class: Handler class bound to the request type.
        factory: Builds a handler from a unit-of-work scope.
        validators: Validator classes run before the handler.
    """

    request_type: type
    handler_class: type
    factory: Callable[[Any], Any]
    validators: tuple[type, ...] = ()


def _declared_request_type(handler_class: type) -> Any:
    """Annotation of the request parameter of ``handler_class.handle``.

    Returns:
        The annotated type, or None when it cannot be resolved.
    """
    handle = handler_class.handle  # type: ignore[attr-defined]
    params = [p for p in inspect.signature(handle).parameters if p != "self"]
    if not params:
        return None
    try:
        hints = get_type_hints(handle)
    except (NameError, TypeError):
        return None
    return hints.get(params[0])


class HandlerRegistry:
    """Registration table mapping request types to handler factories."""

    def __init__(self) -> None:
        self._registrations: dict[type, HandlerRegistration] = {}

    def register(
        self,
        request_type: type,
        handler_class: type,
        factory: Callable[[Any], Any],
        validators: Iterable[type] = (),
    ) -> None:
        """Add a request type.

        Raises:
            HandlerConfigurationError: On a duplicate registration, a request
                type that is neither Command nor Query, a handler without an
                async ``handle`` for this type, or a validator without an
                async ``validate``.
        """
        name = request_type.__qualname__
        if request_type in self._registrations:
            existing = self._registrations[request_type].handler_class.__qualname__
            raise HandlerConfigurationError(
                f"{name} already has handler {existing}; "
                f"cannot also register {handler_class.__qualname__}"
            )
        if not (is_command(request_type) or is_query(request_type)):
            raise HandlerConfigurationError(f"{name} is not a Command or Query")

        handle = getattr(handler_class, "handle", None)
        if handle is None or not inspect.iscoroutinefunction(handle):
            raise HandlerConfigurationError(
                f"{handler_class.__qualname__} must define 'async def handle'"
            )
        declared = _declared_request_type(handler_class)
        if declared is not None and declared is not request_type:
            raise HandlerConfigurationError(
                f"{handler_class.__qualname__}.handle accepts {declared!r}, "
                f"not {name}"
            )

        validator_classes = tuple(validators)
        for validator_class in validator_classes:
            validate = getattr(validator_class, "validate", None)
            if validate is None or not inspect.iscoroutinefunction(validate):
                raise HandlerConfigurationError(
                    f"{validator_class.__qualname__} must define 'async def validate'"
                )

        self._registrations[request_type] = HandlerRegistration(
            request_type=request_type,
            handler_class=handler_class,
            factory=factory,
            validators=validator_classes,
        )

    def resolve(self, request_type: type) -> HandlerRegistration:
        """Look up the registration for a request type.

        Raises:
            HandlerNotRegisteredError: If the type was never registered.
        """
        try:
            return self._registrations[request_type]
        except KeyError:
            raise HandlerNotRegisteredError(request_type) from None

    def verify(self, request_types: Iterable[type]) -> None:
        """Check that every known request type has a handler.

        Args:
            request_types: All request classes the application defines.

        Raises:
            HandlerConfigurationError: Listing every type without a handler.
        """
        missing = sorted(
            cls.__qualname__ for cls in request_types if cls not in self._registrations
        )
        if missing:
            raise HandlerConfigurationError(
                f"No handler registered for: {', '.join(missing)}"
            )

    def registered_types(self) -> list[type]:
        return list(self._registrations)

    def __contains__(self, request_type: object) -> bool:
        return request_type in self._registrations

    def __len__(self) -> int:
        return len(self._registrations)
