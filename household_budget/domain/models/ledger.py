"""Domain models for month-keyed ledger entries."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class Income:
    """Income received by a member in a month.

    Attributes:
        id: Store identity.
        member: Owning household member.
        income_type: Salary or Other.
        description: Free-text label.
        amount: Non-negative amount.
        month: MonthKey (YYYY-MM) the entry belongs to.
        created_at: Creation timestamp assigned by the store.
    """

    id: str
    member: str
    income_type: str
    description: str
    amount: Decimal
    month: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class Tax:
    """Tax withheld from a member's income in a month."""

    id: str
    member: str
    description: str
    amount: Decimal
    month: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class Expense:
    """Planned or paid expense in a month.

    ``include_vat`` adds the VAT surcharge when amounts are aggregated; the
    stored ``amount`` is always the pre-VAT value. ``balance_account_id`` is
    a weak reference to a balance account the expense pays down.
    """

    id: str
    member: str
    category: str
    description: str
    amount: Decimal
    month: str
    is_shared: bool = False
    is_recurring: bool = False
    is_paid: bool = False
    include_vat: bool = False
    note: str | None = None
    balance_account_id: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class DiscretionaryExpense:
    """Discretionary ("unnecessary") spending in a month."""

    id: str
    member: str
    description: str
    amount: Decimal
    month: str
    note: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class MonthLedger:
    """Every ledger row recorded for one month."""

    month: str
    incomes: list[Income] = field(default_factory=list)
    taxes: list[Tax] = field(default_factory=list)
    expenses: list[Expense] = field(default_factory=list)
    discretionary: list[DiscretionaryExpense] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Return True when no income, tax, or expense row exists.

        Discretionary rows do not count towards emptiness.
        """
        return not (self.incomes or self.taxes or self.expenses)

    @property
    def row_count(self) -> int:
        """Return the number of rows across all four kinds."""
        return (
            len(self.incomes)
            + len(self.taxes)
            + len(self.expenses)
            + len(self.discretionary)
        )


__all__ = [
    "Income",
    "Tax",
    "Expense",
    "DiscretionaryExpense",
    "MonthLedger",
]
