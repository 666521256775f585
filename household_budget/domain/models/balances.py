"""Domain models for balance accounts and their projections."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class BalanceAccount:
    """Debt-like liability paid down by a fixed monthly deduction.

    Attributes:
        id: Store identity.
        name: Display name.
        description: Free-text description.
        initial_balance: Amount owed before the first deduction.
        monthly_deduction: Amount scheduled to be paid every month.
        start_month: MonthKey of the first scheduled deduction.
        created_at: Creation timestamp assigned by the store.
    """

    id: str
    name: str
    description: str
    initial_balance: Decimal
    monthly_deduction: Decimal
    start_month: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class BalanceHistoryEntry:
    """Snapshot of a balance account's scheduled movement in one month."""

    id: str
    account_id: str
    month: str
    opening_balance: Decimal
    deduction: Decimal
    closing_balance: Decimal
    created_at: datetime | None = None


@dataclass(frozen=True)
class ScheduledBalance:
    """Schedule-model balance of an account at a given month."""

    month: str
    balance: Decimal


@dataclass(frozen=True)
class BalanceProjection:
    """Schedule and actual-payment valuations of an account for a month.

    Attributes:
        account: Projected balance account.
        month: MonthKey the projection is computed for.
        schedule_balance: Balance assuming on-time deductions.
        actual_balance: Balance given paid expenses linked to the account.
        total_paid: Sum of linked paid expenses up to the month.
        difference: ``schedule_balance - actual_balance``.
        progress_percentage: Share of the initial balance paid off.
        months_remaining: Scheduled deductions left (``math.inf`` when the
            account has no monthly deduction).
        estimated_payoff_month: Month the actual balance reaches zero at
            the scheduled deduction, or None without a deduction.
    """

    account: BalanceAccount
    month: str
    schedule_balance: Decimal
    actual_balance: Decimal
    total_paid: Decimal
    difference: Decimal
    progress_percentage: Decimal
    months_remaining: int | float
    estimated_payoff_month: str | None

    @property
    def status(self) -> str:
        """Return behind, ahead, or on_track relative to the schedule."""
        if self.difference < 0:
            return "behind"
        if self.difference > 0:
            return "ahead"
        return "on_track"

    @property
    def is_paid_off(self) -> bool:
        """Return True when nothing remains under the actual model."""
        return self.actual_balance <= 0


@dataclass(frozen=True)
class BalanceOverview:
    """Projections for every account plus household totals."""

    month: str
    projections: list[BalanceProjection]
    total_initial_balance: Decimal
    total_actual_balance: Decimal
    total_paid_off: Decimal
    overall_progress: Decimal


__all__ = [
    "BalanceAccount",
    "BalanceHistoryEntry",
    "ScheduledBalance",
    "BalanceProjection",
    "BalanceOverview",
]
