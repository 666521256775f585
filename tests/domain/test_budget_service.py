"""Tests for the monthly budget aggregation services."""

from decimal import Decimal

from household_budget.domain.models import (
    DiscretionaryExpense,
    Expense,
    Income,
    MonthLedger,
    Tax,
)
from household_budget.domain.services.budget import (
    build_monthly_view,
    compute_household_summary,
    compute_member_summary,
    effective_expense_amount,
    expenses_by_category,
    sorted_category_totals,
)


def _income(member, amount, income_type="Salary", id_="i1"):
    return Income(
        id=id_,
        member=member,
        income_type=income_type,
        description="Pay",
        amount=Decimal(amount),
        month="2025-01",
    )


def _tax(member, amount, id_="t1"):
    return Tax(
        id=id_,
        member=member,
        description="PAYE",
        amount=Decimal(amount),
        month="2025-01",
    )


def _expense(
    member,
    amount,
    category="Groceries",
    include_vat=False,
    id_="e1",
):
    return Expense(
        id=id_,
        member=member,
        category=category,
        description=category,
        amount=Decimal(amount),
        month="2025-01",
        include_vat=include_vat,
    )


def test_member_summary_matches_worked_example() -> None:
    summary = compute_member_summary(
        "Nikkie",
        [_income("Nikkie", "20000")],
        [_tax("Nikkie", "3000")],
        [_expense("Nikkie", "1500")],
    )

    assert summary.gross_income == Decimal("20000.00")
    assert summary.total_taxes == Decimal("3000.00")
    assert summary.net_income == Decimal("17000.00")
    assert summary.total_expenses == Decimal("1500.00")
    assert summary.remaining_balance == Decimal("15500.00")


def test_member_summary_ignores_other_members_and_adds_other_income() -> None:
    summary = compute_member_summary(
        "Hein",
        [
            _income("Hein", "10000"),
            _income("Hein", "500", income_type="Other", id_="i2"),
            _income("Nikkie", "99999", id_="i3"),
        ],
        [_tax("Hein", "1000")],
        [_expense("Nikkie", "700")],
        [
            DiscretionaryExpense(
                id="d1",
                member="Hein",
                description="Games",
                amount=Decimal("250"),
                month="2025-01",
            )
        ],
    )

    assert summary.other_income == Decimal("500.00")
    assert summary.total_income == Decimal("10500.00")
    assert summary.net_income == Decimal("9500.00")
    assert summary.total_expenses == Decimal("0.00")
    assert summary.total_discretionary == Decimal("250.00")
    assert summary.remaining_balance == Decimal("9250.00")


def test_household_summary_is_sum_of_members() -> None:
    incomes = [_income("Nikkie", "20000"), _income("Hein", "15000", id_="i2")]
    taxes = [_tax("Nikkie", "3000"), _tax("Hein", "2000", id_="t2")]
    expenses = [
        _expense("Nikkie", "1500"),
        _expense("Hein", "800", category="Dining", id_="e2"),
    ]

    household = compute_household_summary(incomes, taxes, expenses)

    nikkie = household.for_member("Nikkie")
    hein = household.for_member("Hein")
    assert household.net_income == nikkie.net_income + hein.net_income
    assert household.remaining_balance == (
        nikkie.remaining_balance + hein.remaining_balance
    )
    assert household.remaining_balance == Decimal("27700.00")


def test_vat_flag_adds_surcharge_without_changing_amount() -> None:
    expense = _expense("Nikkie", "100.00", include_vat=True)

    assert effective_expense_amount(expense) == Decimal("115.00")
    assert expense.amount == Decimal("100.00")


def test_vat_is_applied_in_member_and_category_totals() -> None:
    expenses = [
        _expense("Nikkie", "100.00", include_vat=True),
        _expense("Nikkie", "50.00", id_="e2"),
    ]

    summary = compute_member_summary("Nikkie", [], [], expenses)
    totals = expenses_by_category(expenses)

    assert summary.total_expenses == Decimal("165.00")
    assert totals == {"Groceries": Decimal("165.00")}


def test_category_totals_are_sorted_descending() -> None:
    expenses = [
        _expense("Nikkie", "100", category="Dining", id_="e1"),
        _expense("Hein", "300", category="Housing", id_="e2"),
        _expense("Hein", "50", category="Dining", id_="e3"),
    ]

    ordered = sorted_category_totals(expenses_by_category(expenses))
    hein_only = expenses_by_category(expenses, member="Hein")

    assert [item.category for item in ordered] == ["Housing", "Dining"]
    assert ordered[1].amount == Decimal("150.00")
    assert hein_only == {
        "Housing": Decimal("300.00"),
        "Dining": Decimal("50.00"),
    }


def test_build_monthly_view_combines_summary_and_categories() -> None:
    ledger = MonthLedger(
        month="2025-01",
        incomes=[_income("Nikkie", "20000")],
        taxes=[_tax("Nikkie", "3000")],
        expenses=[_expense("Nikkie", "1500")],
    )

    view = build_monthly_view(ledger)

    assert view.month == "2025-01"
    assert view.household.remaining_balance == Decimal("15500.00")
    assert view.categories[0].category == "Groceries"
