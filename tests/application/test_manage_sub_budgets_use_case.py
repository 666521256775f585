"""Tests for the ManageSubBudgetsUseCase."""

from datetime import date
from decimal import Decimal

from household_budget.application.use_cases.manage_sub_budgets import (
    ManageSubBudgetsUseCase,
)
from household_budget.domain.errors import (
    FormatError,
    NotFound,
    PartialWriteFailure,
    StoreError,
)
from household_budget.domain.models import BudgetEntryInput, BudgetExpenseInput


def _entry(amount="2000") -> BudgetEntryInput:
    return BudgetEntryInput(
        name="Holiday",
        description="Beach week",
        budget_amount=amount,
        member="Nikkie",
        category="Entertainment",
    )


def test_month_budgets_include_totals(sub_budget_repository, logger) -> None:
    use_case = ManageSubBudgetsUseCase(sub_budget_repository, logger=logger)
    budget = use_case.add_budget("2025-01", _entry()).value
    use_case.add_expense(
        budget.id,
        BudgetExpenseInput("Hotel", "1200", date(2025, 1, 4)),
    )
    use_case.add_expense(
        budget.id,
        BudgetExpenseInput("Fuel", "300", date(2025, 1, 6)),
    )

    result = use_case.get_month_budgets("2025-01")

    assert result.ok
    [summary] = result.value
    assert summary.total_spent == Decimal("1500.00")
    assert summary.remaining_balance == Decimal("500.00")
    assert summary.percentage_used == Decimal("75")
    assert [e.description for e in summary.expenses] == ["Fuel", "Hotel"]


def test_empty_month_skips_expense_query(sub_budget_repository, logger) -> None:
    use_case = ManageSubBudgetsUseCase(sub_budget_repository, logger=logger)

    result = use_case.get_month_budgets("2025-01")

    assert result.value == []
    assert sub_budget_repository.fetch_expense_calls == []


def test_update_budget_and_expense(sub_budget_repository, logger) -> None:
    use_case = ManageSubBudgetsUseCase(sub_budget_repository, logger=logger)
    budget = use_case.add_budget("2025-01", _entry()).value
    expense = use_case.add_expense(
        budget.id,
        BudgetExpenseInput("Hotel", "1200", date(2025, 1, 4)),
    ).value

    updated_budget = use_case.update_budget(budget.id, _entry("2500"))
    updated_expense = use_case.update_expense(
        expense.id,
        BudgetExpenseInput("Hotel", "1100", date(2025, 1, 5)),
    )
    removed = use_case.delete_expense(expense.id)
    missing = use_case.update_expense(
        expense.id,
        BudgetExpenseInput("Hotel", "1", date(2025, 1, 5)),
    )

    assert updated_budget.value.budget_amount == Decimal("2500.00")
    assert updated_expense.value.amount == Decimal("1100.00")
    assert removed.ok
    assert isinstance(missing.error, NotFound)


def test_add_budget_validates_input(sub_budget_repository, logger) -> None:
    use_case = ManageSubBudgetsUseCase(sub_budget_repository, logger=logger)

    result = use_case.add_budget("2025-01", _entry("-1"))

    assert isinstance(result.error, FormatError)
    assert sub_budget_repository.budgets == {}


def test_delete_budget_removes_expenses_first(
    sub_budget_repository,
    logger,
) -> None:
    use_case = ManageSubBudgetsUseCase(sub_budget_repository, logger=logger)
    budget = use_case.add_budget("2025-01", _entry()).value
    use_case.add_expense(
        budget.id,
        BudgetExpenseInput("Hotel", "1200", date(2025, 1, 4)),
    )

    result = use_case.delete_budget(budget.id)

    assert result.ok
    assert sub_budget_repository.budgets == {}
    assert sub_budget_repository.expenses == {}


def test_delete_budget_partial_failure(sub_budget_repository, logger) -> None:
    use_case = ManageSubBudgetsUseCase(sub_budget_repository, logger=logger)
    budget = use_case.add_budget("2025-01", _entry()).value
    sub_budget_repository.fail_on["delete_budget"] = StoreError("boom")

    result = use_case.delete_budget(budget.id)

    assert isinstance(result.error, PartialWriteFailure)
    assert result.error.completed == 1


def test_delete_missing_budget_is_not_found(
    sub_budget_repository,
    logger,
) -> None:
    use_case = ManageSubBudgetsUseCase(sub_budget_repository, logger=logger)

    result = use_case.delete_budget("no-such-budget")

    assert isinstance(result.error, NotFound)
    assert not isinstance(result.error, PartialWriteFailure)
    logger.error.assert_called_once()


def test_delete_orphaned_expenses_reports_partial_write(
    sub_budget_repository,
    logger,
) -> None:
    use_case = ManageSubBudgetsUseCase(sub_budget_repository, logger=logger)
    use_case.add_expense(
        "gone-budget",
        BudgetExpenseInput("Hotel", "1200", date(2025, 1, 4)),
    )

    result = use_case.delete_budget("gone-budget")

    assert isinstance(result.error, PartialWriteFailure)
    assert isinstance(result.error.cause, NotFound)
    assert sub_budget_repository.expenses == {}
