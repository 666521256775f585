"""Domain models for ad-hoc sub-budgets."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class BudgetEntry:
    """Spending envelope for a member and category in a month."""

    id: str
    name: str
    description: str
    budget_amount: Decimal
    month: str
    member: str
    category: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class BudgetExpense:
    """Spending recorded against a sub-budget."""

    id: str
    budget_id: str
    description: str
    amount: Decimal
    date: date
    created_at: datetime | None = None


@dataclass(frozen=True)
class BudgetWithExpenses:
    """A sub-budget with its expenses and derived totals."""

    budget: BudgetEntry
    expenses: list[BudgetExpense] = field(default_factory=list)
    total_spent: Decimal = Decimal("0.00")
    remaining_balance: Decimal = Decimal("0.00")
    percentage_used: Decimal = Decimal("0")


__all__ = ["BudgetEntry", "BudgetExpense", "BudgetWithExpenses"]
