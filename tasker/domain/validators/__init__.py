"""Pure validation functions (raise ValueError on failure)."""

from tasker.domain.validators.functions import normalize_email, validate_email

__all__ = ["normalize_email", "validate_email"]
