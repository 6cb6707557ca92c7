"""Views derived from the CQRS registry.

Used by the container and by registry compliance tests.
"""

from tasker.application.cqrs.metadata import CommandMetadata, QueryMetadata
from tasker.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY


def get_all_commands() -> list[type]:
    return [meta.command_class for meta in COMMAND_REGISTRY]


def get_all_queries() -> list[type]:
    return [meta.query_class for meta in QUERY_REGISTRY]


def get_command_metadata(command_class: type) -> CommandMetadata | None:
    return next(
        (meta for meta in COMMAND_REGISTRY if meta.command_class is command_class),
        None,
    )


def get_query_metadata(query_class: type) -> QueryMetadata | None:
    return next(
        (meta for meta in QUERY_REGISTRY if meta.query_class is query_class), None
    )


def iter_registrations() -> list[tuple[type, type, tuple[type, ...]]]:
    """Every registry entry as (request class, handler class, validators).

    Commands first, then queries, each in registry order.
    """
    entries = [
        (meta.command_class, meta.handler_class, meta.validators)
        for meta in COMMAND_REGISTRY
    ]
    entries += [
        (meta.query_class, meta.handler_class, meta.validators)
        for meta in QUERY_REGISTRY
    ]
    return entries


def validate_registry_consistency() -> list[str]:
    """Find drift in the registry.

    Returns:
        List of problems (empty when consistent).
    """
    problems: list[str] = []
    request_classes = [request for request, _, _ in iter_registrations()]
    seen: set[type] = set()
    for request in request_classes:
        if request in seen:
            problems.append(f"{request.__name__} is registered more than once")
        seen.add(request)

    for _, handler, _ in iter_registrations():
        if not hasattr(handler, "handle"):
            problems.append(f"{handler.__name__} has no handle method")
        if not handler.__name__.endswith("Handler"):
            problems.append(f"{handler.__name__} does not follow *Handler naming")
    return problems
