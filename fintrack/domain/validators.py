"""
Shared validation rules for domain entities and use cases.
"""

import re
from typing import Any, NamedTuple

from .exceptions import DomainValidationError

MONTH_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}")
MIN_YEAR = 1900
MAX_YEAR = 2100


class MonthAndYear(NamedTuple):
    month: int
    year: int


def is_blank(value: Any) -> bool:
    """Check if value is missing or only whitespace."""
    return not isinstance(value, str) or value.strip() == ""


def validate_month(month: Any) -> MonthAndYear:
    """
    Validate a ``YYYY-MM`` month key.

    The format is checked first, then the month and year ranges.

    Args:
        month: Month string to validate.

    Returns:
        Parsed month and year.

    Raises:
        DomainValidationError: First rule the value violates.
    """
    if is_blank(month):
        raise DomainValidationError("Month cannot be empty")

    if not MONTH_PATTERN.fullmatch(month):
        raise DomainValidationError("Month must be in YYYY-MM format")

    year_part, month_part = month.split("-")
    parsed = MonthAndYear(month=int(month_part), year=int(year_part))

    if not 1 <= parsed.month <= 12:
        raise DomainValidationError("Month must be between 01 and 12")

    if not MIN_YEAR <= parsed.year <= MAX_YEAR:
        raise DomainValidationError(
            f"Year must be between {MIN_YEAR} and {MAX_YEAR}"
        )

    return parsed
