"""Domain services for monthly budget aggregation."""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from household_budget.domain.constants import (
    INCOME_TYPE_OTHER,
    INCOME_TYPE_SALARY,
    MEMBERS,
    VAT_RATE,
)
from household_budget.domain.models import (
    CategoryTotal,
    DiscretionaryExpense,
    Expense,
    HouseholdSummary,
    Income,
    MemberSummary,
    MonthLedger,
    MonthlyBudgetView,
    Tax,
)
from household_budget.utils.decimal_utils import sum_money, to_money

_SUMMARY_FIELDS = (
    "gross_income",
    "other_income",
    "total_income",
    "total_taxes",
    "net_income",
    "total_expenses",
    "total_discretionary",
    "remaining_balance",
)


def vat_amount(amount: Decimal) -> Decimal:
    """Return the VAT surcharge for a pre-VAT amount."""
    return to_money(to_money(amount) * VAT_RATE)


def effective_expense_amount(expense: Expense) -> Decimal:
    """Return the amount an expense weighs in every aggregate.

    VAT-flagged expenses count with their surcharge; the stored amount is
    never modified.
    """
    amount = to_money(expense.amount)
    if expense.include_vat:
        return amount + vat_amount(amount)
    return amount


def compute_member_summary(
    member: str,
    incomes: Iterable[Income],
    taxes: Iterable[Tax],
    expenses: Iterable[Expense],
    discretionary: Iterable[DiscretionaryExpense] = (),
) -> MemberSummary:
    """Compute the monthly totals of one member.

    Rows owned by other members are ignored.

    Args:
        member: Household member to summarize.
        incomes: Income rows of the month.
        taxes: Tax rows of the month.
        expenses: Expense rows of the month.
        discretionary: Discretionary expense rows of the month.

    Returns:
        MemberSummary: Income, tax, expense, and remaining totals.
    """
    member_incomes = [row for row in incomes if row.member == member]
    gross_income = sum_money(
        row.amount
        for row in member_incomes
        if row.income_type == INCOME_TYPE_SALARY
    )
    other_income = sum_money(
        row.amount
        for row in member_incomes
        if row.income_type == INCOME_TYPE_OTHER
    )
    total_taxes = sum_money(row.amount for row in taxes if row.member == member)
    total_expenses = sum_money(
        effective_expense_amount(row)
        for row in expenses
        if row.member == member
    )
    total_discretionary = sum_money(
        row.amount for row in discretionary if row.member == member
    )
    net_income = gross_income - total_taxes + other_income
    return MemberSummary(
        member=member,
        gross_income=gross_income,
        other_income=other_income,
        total_income=gross_income + other_income,
        total_taxes=total_taxes,
        net_income=net_income,
        total_expenses=total_expenses,
        total_discretionary=total_discretionary,
        remaining_balance=net_income - total_expenses - total_discretionary,
    )


def compute_household_summary(
    incomes: Iterable[Income],
    taxes: Iterable[Tax],
    expenses: Iterable[Expense],
    discretionary: Iterable[DiscretionaryExpense] = (),
    *,
    members: Iterable[str] = MEMBERS,
) -> HouseholdSummary:
    """Compute member summaries and their household totals.

    Args:
        incomes: Income rows of the month.
        taxes: Tax rows of the month.
        expenses: Expense rows of the month.
        discretionary: Discretionary expense rows of the month.
        members: Members to include, each exactly once.

    Returns:
        HouseholdSummary: Field-wise sums plus the per-member summaries.
    """
    incomes, taxes = list(incomes), list(taxes)
    expenses, discretionary = list(expenses), list(discretionary)
    member_summaries = {
        member: compute_member_summary(
            member,
            incomes,
            taxes,
            expenses,
            discretionary,
        )
        for member in dict.fromkeys(members)
    }
    totals = {
        name: sum_money(
            getattr(summary, name) for summary in member_summaries.values()
        )
        for name in _SUMMARY_FIELDS
    }
    return HouseholdSummary(member_summaries=member_summaries, **totals)


def expenses_by_category(
    expenses: Iterable[Expense],
    member: str | None = None,
) -> dict[str, Decimal]:
    """Sum expenses per category, optionally for a single member."""
    totals: dict[str, Decimal] = {}
    for expense in expenses:
        if member is not None and expense.member != member:
            continue
        totals[expense.category] = totals.get(
            expense.category,
            Decimal("0.00"),
        ) + effective_expense_amount(expense)
    return totals


def sorted_category_totals(
    totals: Mapping[str, Decimal],
) -> list[CategoryTotal]:
    """Return category totals ordered by amount, largest first."""
    return [
        CategoryTotal(category=category, amount=amount)
        for category, amount in sorted(
            totals.items(),
            key=lambda item: (-item[1], item[0]),
        )
    ]


def build_monthly_view(ledger: MonthLedger) -> MonthlyBudgetView:
    """Aggregate an already-loaded month ledger for presentation."""
    household = compute_household_summary(
        ledger.incomes,
        ledger.taxes,
        ledger.expenses,
        ledger.discretionary,
    )
    categories = sorted_category_totals(expenses_by_category(ledger.expenses))
    return MonthlyBudgetView(
        ledger=ledger,
        household=household,
        categories=categories,
    )


__all__ = [
    "vat_amount",
    "effective_expense_amount",
    "compute_member_summary",
    "compute_household_summary",
    "expenses_by_category",
    "sorted_category_totals",
    "build_monthly_view",
]
