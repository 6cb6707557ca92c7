"""Aggregated validation failure returned by the validation stage."""

from collections.abc import Iterable
from dataclasses import dataclass

from tasker.core.enums import ErrorCode
from tasker.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True)
class FieldFailure:
    """One (field, message) pair reported by a validator."""

    field: str
    message: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationFailedError(DomainError):
    """All failures reported by every validator of a request.

    Attributes:
        failures: Failures in validator registration order.
    """

    failures: tuple[FieldFailure, ...] = ()

    @classmethod
    def from_failures(cls, failures: Iterable[FieldFailure]) -> "ValidationFailedError":
        """Build the error from collected failures.

        Args:
            failures: Failures from one or more validators.

        Returns:
            ValidationFailedError with the standard code and message.
        """
        return cls(
            code=ErrorCode.VALIDATION_FAILED,
            message="One or more validation errors occurred.",
            failures=tuple(failures),
        )

    def errors_by_field(self) -> dict[str, list[str]]:
        """Group failure messages by field name.

        Returns:
            Mapping of field name to its messages, duplicates removed.
        """
        grouped: dict[str, list[str]] = {}
        for failure in self.failures:
            messages = grouped.setdefault(failure.field, [])
            if failure.message not in messages:
                messages.append(failure.message)
        return grouped
