"""CQRS metadata types.

Frozen dataclasses describing registry entries.

Design Principles:
- Immutable (frozen=True): registry entries never change at runtime
- Type-safe (kw_only=True): explicit field assignment
- Self-checking: ``__post_init__`` rejects inconsistent entries at import
"""

from dataclasses import dataclass

from tasker.application.cqrs.requests import is_command, is_query


@dataclass(frozen=True, kw_only=True)
class CommandMetadata:
    """Metadata for a command in the CQRS registry.

    Attributes:
        command_class: The command dataclass (e.g., RegisterUser).
        handler_class: The handler class (e.g., RegisterUserHandler).
        validators: Validator classes run concurrently before the handler.

    Example:
        >>> CommandMetadata(
        ...     command_class=LogoutUser,
        ...     handler_class=LogoutUserHandler,
        ...     validators=(RefreshTokenPresentValidator,),
        ... )
    """

    command_class: type
    handler_class: type
    validators: tuple[type, ...] = ()

    def __post_init__(self) -> None:
        """Validate metadata consistency."""
        if not is_command(self.command_class):
            raise ValueError(f"{self.command_class.__name__} is not a Command")


@dataclass(frozen=True, kw_only=True)
class QueryMetadata:
    """Metadata for a query in the CQRS registry.

    Attributes:
        query_class: The query dataclass (e.g., GetTaskItemById).
        handler_class: The handler class.
        validators: Validator classes run before the handler.
    """

    query_class: type
    handler_class: type
    validators: tuple[type, ...] = ()

    def __post_init__(self) -> None:
        if not is_query(self.query_class):
            raise ValueError(f"{self.query_class.__name__} is not a Query")
