"""Boundary validation for request structs.

Every validator returns a normalized copy (amounts quantized to cents,
text stripped) or raises FormatError before any store call happens.
"""

from dataclasses import replace
from datetime import date
from decimal import Decimal

from household_budget.domain.constants import (
    DISCRETIONARY,
    EXPENSE_CATEGORIES,
    EXPENSES,
    INCOME_TYPES,
    INCOMES,
    MEMBERS,
    TAXES,
)
from household_budget.domain.errors import FormatError
from household_budget.domain.models import (
    BalanceAccountInput,
    BudgetEntryInput,
    BudgetExpenseInput,
    DiscretionaryInput,
    ExpenseInput,
    IncomeInput,
    LedgerInput,
    TaxInput,
)
from household_budget.domain.services.month_keys import validate_month_key
from household_budget.utils.decimal_utils import to_money

_LEDGER_INPUT_TYPES = {
    INCOMES: IncomeInput,
    TAXES: TaxInput,
    EXPENSES: ExpenseInput,
    DISCRETIONARY: DiscretionaryInput,
}


def parse_amount(value, field_name: str = "amount") -> Decimal:
    """Parse a non-negative monetary amount.

    Args:
        value: Raw amount (Decimal, int, or numeric string).
        field_name: Field name used in error messages.

    Returns:
        Decimal: Amount quantized to cents.

    Raises:
        FormatError: If the value is not a finite, non-negative number.
    """
    if isinstance(value, bool):
        raise FormatError(f"Invalid {field_name}: {value!r}")
    if isinstance(value, str):
        value = value.strip()
    try:
        amount = to_money(value)
    except ValueError as exc:
        raise FormatError(f"Invalid {field_name}: {value!r}") from exc
    if amount < 0:
        raise FormatError(f"{field_name} must not be negative: {amount}")
    return amount


def validate_member(member: str) -> str:
    """Ensure the member belongs to the household."""
    if member not in MEMBERS:
        raise FormatError(f"Unknown member: {member!r}")
    return member


def validate_category(category: str) -> str:
    """Ensure the expense category is one of the fixed categories."""
    if category not in EXPENSE_CATEGORIES:
        raise FormatError(f"Unknown expense category: {category!r}")
    return category


def validate_income_type(income_type: str) -> str:
    """Ensure the income type is Salary or Other."""
    if income_type not in INCOME_TYPES:
        raise FormatError(f"Unknown income type: {income_type!r}")
    return income_type


def _require_text(value: str, field_name: str) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise FormatError(f"{field_name} must not be empty")
    return cleaned


def _optional_text(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


def validate_ledger_input(kind: str, data: LedgerInput) -> LedgerInput:
    """Validate a ledger input against the kind it is written to.

    Args:
        kind: Ledger kind (table name).
        data: Request struct for that kind.

    Returns:
        LedgerInput: Normalized copy of the input.

    Raises:
        FormatError: On an unknown kind, a mismatched input type, or an
            invalid field.
    """
    expected = _LEDGER_INPUT_TYPES.get(kind)
    if expected is None:
        raise FormatError(f"Unknown ledger kind: {kind!r}")
    if not isinstance(data, expected):
        raise FormatError(
            f"{kind} expects {expected.__name__}, "
            f"got {type(data).__name__}"
        )
    changes = {
        "member": validate_member(data.member),
        "description": _require_text(data.description, "description"),
        "amount": parse_amount(data.amount),
    }
    if isinstance(data, IncomeInput):
        changes["income_type"] = validate_income_type(data.income_type)
    if isinstance(data, ExpenseInput):
        changes["category"] = validate_category(data.category)
        changes["balance_account_id"] = _optional_text(data.balance_account_id)
    if isinstance(data, (ExpenseInput, DiscretionaryInput)):
        changes["note"] = _optional_text(data.note)
    return replace(data, **changes)


def validate_balance_account_input(
    data: BalanceAccountInput,
) -> BalanceAccountInput:
    """Validate a balance account request."""
    return replace(
        data,
        name=_require_text(data.name, "name"),
        description=(data.description or "").strip(),
        initial_balance=parse_amount(data.initial_balance, "initial_balance"),
        monthly_deduction=parse_amount(
            data.monthly_deduction,
            "monthly_deduction",
        ),
        start_month=validate_month_key(data.start_month),
    )


def validate_budget_entry_input(data: BudgetEntryInput) -> BudgetEntryInput:
    """Validate a sub-budget request."""
    return replace(
        data,
        name=_require_text(data.name, "name"),
        description=(data.description or "").strip(),
        budget_amount=parse_amount(data.budget_amount, "budget_amount"),
        member=validate_member(data.member),
        category=validate_category(data.category),
    )


def validate_budget_expense_input(
    data: BudgetExpenseInput,
) -> BudgetExpenseInput:
    """Validate a sub-budget expense request."""
    if not isinstance(data.date, date):
        raise FormatError(f"Invalid expense date: {data.date!r}")
    return replace(
        data,
        description=_require_text(data.description, "description"),
        amount=parse_amount(data.amount),
    )


__all__ = [
    "parse_amount",
    "validate_member",
    "validate_category",
    "validate_income_type",
    "validate_ledger_input",
    "validate_balance_account_input",
    "validate_budget_entry_input",
    "validate_budget_expense_input",
]
