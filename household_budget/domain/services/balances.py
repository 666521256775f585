"""Balance projection engine for balance accounts.

Two valuations coexist and may drift apart permanently:

* the schedule model assumes one ``monthly_deduction`` per month from
  ``start_month`` onwards, the start month included;
* the actual model subtracts the paid expenses linked to the account.
"""

import math
from collections.abc import Iterable
from decimal import ROUND_CEILING, Decimal

from household_budget.domain.errors import FormatError
from household_budget.domain.models import (
    BalanceAccount,
    BalanceOverview,
    BalanceProjection,
    Expense,
    ScheduledBalance,
)
from household_budget.domain.services.budget import effective_expense_amount
from household_budget.domain.services.month_keys import (
    add_months,
    is_on_or_before,
    months_elapsed,
    previous_month,
)
from household_budget.utils.decimal_utils import sum_money, to_money

_ZERO = Decimal("0.00")
_HUNDRED = Decimal("100")


def schedule_balance(account: BalanceAccount, month: str) -> Decimal:
    """Return the balance expected at ``month`` under on-time deductions.

    Args:
        account: Balance account to project.
        month: Target MonthKey.

    Returns:
        Decimal: Initial balance before the start month, otherwise the
        initial balance minus one deduction per elapsed month (start month
        included), floored at zero.
    """
    initial = to_money(account.initial_balance)
    elapsed = months_elapsed(account.start_month, month)
    if elapsed < 0:
        return initial
    deducted = to_money(account.monthly_deduction) * (elapsed + 1)
    return max(_ZERO, initial - deducted)


def months_remaining(account: BalanceAccount, month: str) -> int | float:
    """Return the scheduled deductions left after ``month``.

    Returns:
        int | float: ``ceil(schedule_balance / monthly_deduction)``, or
        ``math.inf`` when no deduction is scheduled.
    """
    deduction = to_money(account.monthly_deduction)
    if deduction <= 0:
        return math.inf
    return _ceil_div(schedule_balance(account, month), deduction)


def linked_payments(
    account: BalanceAccount,
    month: str,
    expenses: Iterable[Expense],
) -> list[Expense]:
    """Return paid expenses linked to the account up to ``month``."""
    return [
        expense
        for expense in expenses
        if expense.balance_account_id == account.id
        and expense.is_paid
        and is_on_or_before(expense.month, month)
    ]


def total_paid(
    account: BalanceAccount,
    month: str,
    expenses: Iterable[Expense],
) -> Decimal:
    """Sum the paid expenses linked to the account up to ``month``."""
    return sum_money(
        effective_expense_amount(expense)
        for expense in linked_payments(account, month, expenses)
    )


def actual_balance(
    account: BalanceAccount,
    month: str,
    expenses: Iterable[Expense],
) -> Decimal:
    """Return the balance left after the payments actually recorded."""
    paid = total_paid(account, month, expenses)
    return max(_ZERO, to_money(account.initial_balance) - paid)


def progress_percentage(initial_balance: Decimal, balance: Decimal) -> Decimal:
    """Return the share of the initial balance already paid off.

    Defined as zero when the initial balance is zero.
    """
    initial = to_money(initial_balance)
    if initial <= 0:
        return Decimal("0")
    return (initial - to_money(balance)) / initial * _HUNDRED


def estimated_payoff_month(
    account: BalanceAccount,
    month: str,
    balance: Decimal,
) -> str | None:
    """Return the month a balance reaches zero at the scheduled deduction.

    Args:
        account: Balance account providing the monthly deduction.
        month: MonthKey the balance was measured at.
        balance: Remaining balance at ``month``.

    Returns:
        str | None: ``month`` itself when nothing remains, None when no
        deduction is scheduled or the payoff falls beyond year 9999.
    """
    remaining = to_money(balance)
    if remaining <= 0:
        return month
    deduction = to_money(account.monthly_deduction)
    if deduction <= 0:
        return None
    try:
        return add_months(month, _ceil_div(remaining, deduction))
    except FormatError:
        return None


def project_balance(
    account: BalanceAccount,
    month: str,
    expenses: Iterable[Expense],
) -> BalanceProjection:
    """Compute both valuations of an account and their reconciliation.

    Args:
        account: Balance account to project.
        month: Target MonthKey.
        expenses: Expenses to consider as payments (any month, any account).

    Returns:
        BalanceProjection: Schedule and actual balances, their signed
        difference (``schedule - actual``), and progress metrics.
    """
    scheduled = schedule_balance(account, month)
    paid = total_paid(account, month, expenses)
    actual = max(_ZERO, to_money(account.initial_balance) - paid)
    return BalanceProjection(
        account=account,
        month=month,
        schedule_balance=scheduled,
        actual_balance=actual,
        total_paid=paid,
        difference=scheduled - actual,
        progress_percentage=progress_percentage(
            account.initial_balance,
            actual,
        ),
        months_remaining=months_remaining(account, month),
        estimated_payoff_month=estimated_payoff_month(account, month, actual),
    )


def balance_schedule(
    account: BalanceAccount,
    months: Iterable[str],
) -> list[ScheduledBalance]:
    """Return schedule balances of an account over a month grid."""
    return [
        ScheduledBalance(month=month, balance=schedule_balance(account, month))
        for month in months
    ]


def summarize_projections(
    month: str,
    projections: list[BalanceProjection],
) -> BalanceOverview:
    """Aggregate account projections into household totals."""
    total_initial = sum_money(
        projection.account.initial_balance for projection in projections
    )
    total_actual = sum_money(
        projection.actual_balance for projection in projections
    )
    return BalanceOverview(
        month=month,
        projections=projections,
        total_initial_balance=total_initial,
        total_actual_balance=total_actual,
        total_paid_off=total_initial - total_actual,
        overall_progress=progress_percentage(total_initial, total_actual),
    )


def build_history_entry(
    account: BalanceAccount,
    month: str,
) -> tuple[Decimal, Decimal, Decimal]:
    """Return the scheduled opening, deduction, and closing for a month.

    Returns:
        tuple[Decimal, Decimal, Decimal]: Opening balance (schedule at the
        previous month), deduction applied, and closing balance.
    """
    opening = schedule_balance(account, previous_month(month))
    closing = schedule_balance(account, month)
    return opening, opening - closing, closing


def _ceil_div(numerator: Decimal, denominator: Decimal) -> int:
    return int((numerator / denominator).to_integral_value(ROUND_CEILING))


__all__ = [
    "schedule_balance",
    "months_remaining",
    "linked_payments",
    "total_paid",
    "actual_balance",
    "progress_percentage",
    "estimated_payoff_month",
    "project_balance",
    "balance_schedule",
    "summarize_projections",
    "build_history_entry",
]
