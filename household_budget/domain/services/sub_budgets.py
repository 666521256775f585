"""Domain services for sub-budget totals."""

from collections.abc import Iterable
from decimal import Decimal

from household_budget.domain.models import (
    BudgetEntry,
    BudgetExpense,
    BudgetWithExpenses,
)
from household_budget.utils.decimal_utils import sum_money, to_money


def summarize_budget(
    budget: BudgetEntry,
    expenses: Iterable[BudgetExpense],
) -> BudgetWithExpenses:
    """Compute spent, remaining, and used share of a sub-budget.

    Args:
        budget: Sub-budget entry.
        expenses: Expenses recorded against any budget; only those of
            ``budget`` are kept.

    Returns:
        BudgetWithExpenses: The budget with its own expenses, newest first.
    """
    own = sorted(
        (expense for expense in expenses if expense.budget_id == budget.id),
        key=lambda expense: expense.date,
        reverse=True,
    )
    amount = to_money(budget.budget_amount)
    spent = sum_money(expense.amount for expense in own)
    percentage = (
        spent / amount * Decimal("100") if amount > 0 else Decimal("0")
    )
    return BudgetWithExpenses(
        budget=budget,
        expenses=own,
        total_spent=spent,
        remaining_balance=amount - spent,
        percentage_used=percentage,
    )


__all__ = ["summarize_budget"]
