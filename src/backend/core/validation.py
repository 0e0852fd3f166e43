"""
Input validation helpers shared by the service layer.
"""

import math
from uuid import UUID

from core.exceptions import InvalidIdentifierError, ValidationError


def parse_identifier(value: str, field: str = "id") -> str:
    """
    Validate a UUID identifier and return its canonical string form.

    Raises:
        InvalidIdentifierError: If ``value`` is not a well-formed UUID.
    """
    if not isinstance(value, str):
        raise InvalidIdentifierError(field, value)
    try:
        return str(UUID(value))
    except ValueError:
        raise InvalidIdentifierError(field, value) from None


def require_positive(value: int, field: str) -> int:
    """Reject page numbers and limits below 1."""
    if value < 1:
        raise ValidationError(f"{field} must be at least 1")
    return value


def require_text(value: str | None, field: str) -> str:
    """Reject missing or whitespace-only text fields."""
    if value is None or not value.strip():
        raise ValidationError(f"{field} is required")
    return value


def calculate_percentage(value: int, total: int) -> int:
    """
    Whole-number share of ``total``, rounded half up.

    Returns 0 when ``total`` is 0.
    """
    if total <= 0:
        return 0
    return math.floor(value / total * 100 + 0.5)
