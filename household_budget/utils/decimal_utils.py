"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_money(value) -> Decimal:
    """Coerce a value to a Decimal rounded to cents.

    Args:
        value: Raw numeric value (Decimal, int, float, or numeric string).

    Returns:
        Decimal: Amount quantized to two decimal places.

    Raises:
        ValueError: If the value cannot be interpreted as a number.
    """
    try:
        amount = coerce_decimal(value)
        if amount.is_finite():
            return amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(f"Invalid monetary amount: {value!r}") from exc
    raise ValueError(f"Invalid monetary amount: {value!r}")


def sum_money(values) -> Decimal:
    """Sum amounts and round the total to cents."""
    return to_money(sum((coerce_decimal(v) for v in values), Decimal("0")))


__all__ = ["CENT", "coerce_decimal", "to_money", "sum_money"]
