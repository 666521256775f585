"""Tests for the GetMonthlySummaryUseCase."""

from decimal import Decimal

from household_budget.application.use_cases.get_monthly_summary import (
    GetMonthlySummaryUseCase,
)
from household_budget.domain.constants import EXPENSES, INCOMES, TAXES
from household_budget.domain.errors import StoreError
from household_budget.domain.models import ExpenseInput, IncomeInput, TaxInput


def test_execute_returns_monthly_view(ledger_repository, logger) -> None:
    ledger_repository.seed(
        INCOMES,
        "2025-01",
        IncomeInput("Nikkie", "Salary", "Pay", Decimal("20000")),
    )
    ledger_repository.seed(
        TAXES,
        "2025-01",
        TaxInput("Nikkie", "PAYE", Decimal("3000")),
    )
    ledger_repository.seed(
        EXPENSES,
        "2025-01",
        ExpenseInput("Nikkie", "Groceries", "Food", Decimal("1500")),
    )
    use_case = GetMonthlySummaryUseCase(ledger_repository, logger=logger)

    result = use_case.execute("2025-01")

    assert result.ok
    view = result.value
    assert view.household.for_member("Nikkie").remaining_balance == Decimal(
        "15500.00"
    )
    assert view.household.for_member("Hein").remaining_balance == Decimal(
        "0.00"
    )
    assert view.categories[0].amount == Decimal("1500.00")
    logger.info.assert_called_once()


def test_execute_reports_store_failure(ledger_repository, logger) -> None:
    ledger_repository.fail_fetch_months = {"2025-01"}
    use_case = GetMonthlySummaryUseCase(ledger_repository, logger=logger)

    result = use_case.execute("2025-01")

    assert not result.ok
    assert isinstance(result.error, StoreError)
    logger.error.assert_called_once()
