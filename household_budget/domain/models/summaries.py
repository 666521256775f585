"""Domain models for monthly budget aggregates."""

from dataclasses import dataclass
from decimal import Decimal

from household_budget.domain.models.ledger import MonthLedger


@dataclass(frozen=True)
class MemberSummary:
    """Monthly totals for a single household member."""

    member: str
    gross_income: Decimal
    other_income: Decimal
    total_income: Decimal
    total_taxes: Decimal
    net_income: Decimal
    total_expenses: Decimal
    total_discretionary: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True)
class HouseholdSummary:
    """Field-wise sums of the member summaries.

    Attributes:
        member_summaries: Summary of each member, keyed by member name.
    """

    gross_income: Decimal
    other_income: Decimal
    total_income: Decimal
    total_taxes: Decimal
    net_income: Decimal
    total_expenses: Decimal
    total_discretionary: Decimal
    remaining_balance: Decimal
    member_summaries: dict[str, MemberSummary]

    def for_member(self, member: str) -> MemberSummary:
        """Return the summary of one member."""
        return self.member_summaries[member]


@dataclass(frozen=True)
class CategoryTotal:
    """Expense total for a single category."""

    category: str
    amount: Decimal


@dataclass(frozen=True)
class MonthlyBudgetView:
    """Ledger rows and aggregates for presentation layers."""

    ledger: MonthLedger
    household: HouseholdSummary
    categories: list[CategoryTotal]

    @property
    def month(self) -> str:
        """Return the MonthKey of the underlying ledger."""
        return self.ledger.month


__all__ = [
    "MemberSummary",
    "HouseholdSummary",
    "CategoryTotal",
    "MonthlyBudgetView",
]
