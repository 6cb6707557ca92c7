"""Validator contract and shared field rules.

Validators are stateless, side-effect free and never depend on one another,
so the validation stage can run them in any order or concurrently.
"""

from collections.abc import Callable
from enum import Enum
from typing import Any, Protocol

from tasker.core.errors import FieldFailure


class RequestValidator[T](Protocol):
    """Reports every problem with a request, not just the first."""

    async def validate(self, request: T) -> list[FieldFailure]:
        ...


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def required(field: str, value: str | None, message: str) -> list[FieldFailure]:
    return [FieldFailure(field, message)] if is_blank(value) else []


def max_length(
    field: str, value: str | None, limit: int, message: str
) -> list[FieldFailure]:
    if value is not None and len(value) > limit:
        return [FieldFailure(field, message)]
    return []


def check(
    field: str, value: Any, rule: Callable[[Any], object], message: str
) -> list[FieldFailure]:
    """Run a domain validator function that raises ValueError on failure."""
    try:
        rule(value)
    except ValueError:
        return [FieldFailure(field, message)]
    return []


def member_of(
    field: str, value: Any, enum_type: type[Enum], message: str
) -> list[FieldFailure]:
    """Accept enum members and their raw values."""
    try:
        enum_type(value)
    except ValueError:
        return [FieldFailure(field, message)]
    return []
