"""Result types for railway-oriented programming.

Handlers return business outcomes as data instead of raising. Programmer and
configuration errors are still raised as exceptions.

Usage:
    async def handle(self, cmd: LogoutUser) -> Result[bool, DomainError]:
        ...
        return Success(value=True)

    match await dispatcher.dispatch(cmd):
        case Success(value=revoked):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value (``None`` for commands without a result).
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: The error describing why the operation did not succeed.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
