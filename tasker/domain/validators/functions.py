"""Centralized validation functions.

Validators are pure functions that raise ValueError on validation failure.
Request validators in the application layer turn those into field failures.
"""

import re

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def normalize_email(v: str) -> str:
    """Canonical form used for storage and lookup.

    Example:
        >>> normalize_email("  User@Example.COM ")
        'user@example.com'
    """
    return v.strip().lower()


def validate_email(v: str) -> str:
    """Validate email format.

    Args:
        v: Email address to validate.

    Returns:
        Normalized email (lowercase).

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> validate_email("User@Example.COM")
        'user@example.com'
        >>> validate_email("invalid")
        ValueError: Invalid email format
    """
    normalized = normalize_email(v)
    if not EMAIL_PATTERN.match(normalized):
        raise ValueError("Invalid email format")
    return normalized
