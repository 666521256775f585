"""Domain helpers for copying ledger rows into another month."""

from collections.abc import Iterable

from household_budget.domain.constants import (
    DISCRETIONARY,
    EXPENSES,
    INCOMES,
    TAXES,
)
from household_budget.domain.models import (
    DiscretionaryExpense,
    DiscretionaryInput,
    Expense,
    ExpenseInput,
    Income,
    IncomeInput,
    LedgerInput,
    MonthLedger,
    Tax,
    TaxInput,
)


def income_to_input(income: Income) -> IncomeInput:
    """Return the editable fields of an income row."""
    return IncomeInput(
        member=income.member,
        income_type=income.income_type,
        description=income.description,
        amount=income.amount,
    )


def tax_to_input(tax: Tax) -> TaxInput:
    """Return the editable fields of a tax row."""
    return TaxInput(
        member=tax.member,
        description=tax.description,
        amount=tax.amount,
    )


def expense_to_input(expense: Expense) -> ExpenseInput:
    """Return the editable fields of an expense row, flags included."""
    return ExpenseInput(
        member=expense.member,
        category=expense.category,
        description=expense.description,
        amount=expense.amount,
        is_shared=expense.is_shared,
        is_recurring=expense.is_recurring,
        is_paid=expense.is_paid,
        include_vat=expense.include_vat,
        note=expense.note,
        balance_account_id=expense.balance_account_id,
    )


def discretionary_to_input(entry: DiscretionaryExpense) -> DiscretionaryInput:
    """Return the editable fields of a discretionary expense row."""
    return DiscretionaryInput(
        member=entry.member,
        description=entry.description,
        amount=entry.amount,
        note=entry.note,
    )


def clone_month(
    ledger: MonthLedger,
    kinds: Iterable[str],
) -> dict[str, list[LedgerInput]]:
    """Return insertable copies of a month's rows, grouped by kind.

    Copies keep every field except identity, creation timestamp, and month.

    Args:
        ledger: Source month.
        kinds: Ledger kinds to copy.

    Returns:
        dict[str, list[LedgerInput]]: Inputs per kind, in ``kinds`` order.
    """
    converters = {
        INCOMES: (ledger.incomes, income_to_input),
        TAXES: (ledger.taxes, tax_to_input),
        EXPENSES: (ledger.expenses, expense_to_input),
        DISCRETIONARY: (ledger.discretionary, discretionary_to_input),
    }
    clones: dict[str, list[LedgerInput]] = {}
    for kind in kinds:
        rows, convert = converters[kind]
        clones[kind] = [convert(row) for row in rows]
    return clones


def default_selection(expenses: Iterable[Expense]) -> set[str]:
    """Return the ids pre-selected in the carry-over dialog (recurring)."""
    return {expense.id for expense in expenses if expense.is_recurring}


__all__ = [
    "income_to_input",
    "tax_to_input",
    "expense_to_input",
    "discretionary_to_input",
    "clone_month",
    "default_selection",
]
