"""Conversions between domain values and SQL parameters or result rows.

Amounts are bound as decimal strings and timestamps as ISO-8601 text so the
same statements work on PostgreSQL and SQLite. Results are normalized back,
whatever type the driver returned.
"""

import uuid
from datetime import date, datetime, timezone
from decimal import Decimal

from household_budget.utils.decimal_utils import to_money


def new_id() -> str:
    return str(uuid.uuid4())


def now_param() -> str:
    """Return the current UTC time as an ISO-8601 parameter."""
    return datetime.now(timezone.utc).replace(tzinfo=None).isoformat(sep=" ")


def money_param(value) -> str:
    return str(to_money(value))


def to_param(value):
    """Convert a domain value into a driver-neutral bind parameter."""
    if isinstance(value, Decimal):
        return money_param(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


def as_money(value) -> Decimal:
    return to_money(value)


def as_bool(value) -> bool:
    return bool(value)


def as_datetime(value) -> datetime | None:
    """Return a datetime from a driver value (datetime or ISO text)."""
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def as_date(value) -> date:
    """Return a date from a driver value (date, datetime, or ISO text)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


__all__ = [
    "new_id",
    "now_param",
    "money_param",
    "to_param",
    "as_money",
    "as_bool",
    "as_datetime",
    "as_date",
]
