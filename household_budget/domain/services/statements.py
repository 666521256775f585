"""Domain helpers for financial statement blob keys."""

from household_budget.domain.errors import FormatError
from household_budget.domain.services.month_keys import validate_month_key


def build_statement_key(month: str, filename: str, timestamp_ms: int) -> str:
    """Return the blob key ``<month>/<epoch-ms>-<filename>``.

    Raises:
        FormatError: On an invalid month or a filename containing a path.
    """
    validate_month_key(month)
    name = (filename or "").strip()
    if not name or "/" in name or "\\" in name or name in (".", ".."):
        raise FormatError(f"Invalid statement filename: {filename!r}")
    return f"{month}/{int(timestamp_ms)}-{name}"


__all__ = ["build_statement_key"]
