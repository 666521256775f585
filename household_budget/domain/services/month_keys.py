"""MonthKey helpers: canonical ``YYYY-MM`` parsing and month arithmetic.

Month keys are compared through their ``(year, month)`` tuples rather than
as raw strings, so ordering never depends on zero-padding.
"""

import re
from datetime import date

from household_budget.domain.errors import FormatError

_MONTH_KEY_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")

_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def parse_month_key(value: str) -> tuple[int, int]:
    """Parse a MonthKey into its year and month.

    Args:
        value: Candidate ``YYYY-MM`` string.

    Returns:
        tuple[int, int]: Year and month (1..12).

    Raises:
        FormatError: If the value is not a canonical month key.
    """
    if not isinstance(value, str):
        raise FormatError(f"Month key must be a string, got {value!r}")
    match = _MONTH_KEY_PATTERN.match(value)
    if match is None:
        raise FormatError(f"Invalid month key '{value}'. Expected YYYY-MM.")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise FormatError(f"Invalid month in month key '{value}'.")
    return year, month


def format_month_key(year: int, month: int) -> str:
    """Build the canonical MonthKey for a year and month."""
    if not 1 <= month <= 12:
        raise FormatError(f"Month out of range: {month}")
    if not 0 <= year <= 9999:
        raise FormatError(f"Year out of range: {year}")
    return f"{year:04d}-{month:02d}"


def validate_month_key(value: str) -> str:
    """Return the month key unchanged after checking its format."""
    parse_month_key(value)
    return value


def month_key_from_date(value: date) -> str:
    """Return the MonthKey containing a calendar date."""
    return format_month_key(value.year, value.month)


def current_month_key(today: date | None = None) -> str:
    """Return the MonthKey of today (or of the provided date)."""
    return month_key_from_date(today or date.today())


def add_months(key: str, count: int) -> str:
    """Shift a MonthKey by a signed number of months."""
    year, month = parse_month_key(key)
    index = year * 12 + (month - 1) + count
    return format_month_key(index // 12, index % 12 + 1)


def previous_month(key: str) -> str:
    """Return the month before ``key``, rolling the year at January."""
    return add_months(key, -1)


def next_month(key: str) -> str:
    """Return the month after ``key``, rolling the year at December."""
    return add_months(key, 1)


def months_elapsed(start: str, end: str) -> int:
    """Return the signed number of months from ``start`` to ``end``.

    Negative when ``end`` precedes ``start``.
    """
    start_year, start_month = parse_month_key(start)
    end_year, end_month = parse_month_key(end)
    return (end_year - start_year) * 12 + (end_month - start_month)


def months_between(a: str, b: str) -> int:
    """Return the signed month count ``a`` minus ``b``."""
    return months_elapsed(b, a)


def compare_month_keys(a: str, b: str) -> int:
    """Compare two month keys, returning -1, 0, or 1."""
    left, right = parse_month_key(a), parse_month_key(b)
    return (left > right) - (left < right)


def is_on_or_before(a: str, b: str) -> bool:
    """Return True when month ``a`` is not after month ``b``."""
    return compare_month_keys(a, b) <= 0


def month_range(start: str, end: str) -> list[str]:
    """Return every month from ``start`` to ``end`` inclusive.

    An empty list is returned when ``end`` precedes ``start``.
    """
    count = months_elapsed(start, end)
    return [add_months(start, offset) for offset in range(count + 1)]


def format_month_label(key: str) -> str:
    """Return a display label such as ``January 2025``."""
    year, month = parse_month_key(key)
    return f"{_MONTH_NAMES[month - 1]} {year}"


__all__ = [
    "parse_month_key",
    "format_month_key",
    "validate_month_key",
    "month_key_from_date",
    "current_month_key",
    "add_months",
    "previous_month",
    "next_month",
    "months_elapsed",
    "months_between",
    "compare_month_keys",
    "is_on_or_before",
    "month_range",
    "format_month_label",
]
