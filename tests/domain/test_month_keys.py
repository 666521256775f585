"""Tests for MonthKey parsing and arithmetic."""

from datetime import date

import pytest

from household_budget.domain.errors import FormatError
from household_budget.domain.services.month_keys import (
    add_months,
    compare_month_keys,
    current_month_key,
    format_month_key,
    format_month_label,
    is_on_or_before,
    month_range,
    months_between,
    months_elapsed,
    next_month,
    parse_month_key,
    previous_month,
    validate_month_key,
)


def test_parse_month_key_returns_year_and_month() -> None:
    assert parse_month_key("2025-03") == (2025, 3)


@pytest.mark.parametrize(
    "value",
    ["2025-13", "2025-00", "2025-3", "25-03", "2025/03", "", "2025-03-01"],
)
def test_parse_month_key_rejects_malformed_values(value: str) -> None:
    with pytest.raises(FormatError):
        parse_month_key(value)


def test_format_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        validate_month_key("March")


def test_previous_month_rolls_back_over_january() -> None:
    assert previous_month("2025-01") == "2024-12"
    assert previous_month("2025-07") == "2025-06"


def test_next_month_rolls_over_december() -> None:
    assert next_month("2024-12") == "2025-01"


def test_next_month_inverts_previous_month() -> None:
    for key in ("2024-01", "2024-06", "2024-12"):
        assert next_month(previous_month(key)) == key


def test_add_months_handles_multi_year_offsets() -> None:
    assert add_months("2025-03", 24) == "2027-03"
    assert add_months("2025-03", -15) == "2023-12"


def test_months_elapsed_is_signed() -> None:
    assert months_elapsed("2025-01", "2025-03") == 2
    assert months_elapsed("2025-03", "2025-01") == -2
    assert months_elapsed("2024-11", "2025-02") == 3


def test_months_between_is_first_minus_second() -> None:
    assert months_between("2025-03", "2025-01") == 2
    assert months_between("2024-12", "2025-01") == -1


def test_compare_month_keys_uses_numeric_order() -> None:
    assert compare_month_keys("2024-12", "2025-01") == -1
    assert compare_month_keys("2025-01", "2025-01") == 0
    assert compare_month_keys("2025-10", "2025-09") == 1
    assert is_on_or_before("2025-02", "2025-03")
    assert not is_on_or_before("2025-04", "2025-03")


def test_month_range_is_inclusive_and_empty_when_reversed() -> None:
    assert month_range("2024-11", "2025-02") == [
        "2024-11",
        "2024-12",
        "2025-01",
        "2025-02",
    ]
    assert month_range("2025-02", "2025-01") == []


def test_format_helpers() -> None:
    assert format_month_key(2025, 1) == "2025-01"
    assert format_month_label("2025-01") == "January 2025"
    assert current_month_key(date(2025, 8, 31)) == "2025-08"
    with pytest.raises(FormatError):
        format_month_key(2025, 13)
