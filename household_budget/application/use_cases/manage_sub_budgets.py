"""Use case for sub-budgets and the expenses tracked against them."""

from household_budget.application.ports.sub_budget_repository import (
    SubBudgetRepositoryPort,
)
from household_budget.application.use_cases.results import OperationResult
from household_budget.domain.errors import (
    BudgetError,
    NotFound,
    PartialWriteFailure,
    StoreError,
)
from household_budget.domain.models import BudgetEntryInput, BudgetExpenseInput
from household_budget.domain.services.month_keys import validate_month_key
from household_budget.domain.services.sub_budgets import summarize_budget
from household_budget.domain.services.validation import (
    validate_budget_entry_input,
    validate_budget_expense_input,
)
from household_budget.infrastructure.logging.logger import get_app_logger


class ManageSubBudgetsUseCase:
    """Create sub-budgets, record spending, and report usage."""

    def __init__(
        self,
        sub_budget_repository: SubBudgetRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            sub_budget_repository: Port giving access to sub-budget rows.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = sub_budget_repository
        self._logger = logger or get_app_logger()

    def get_month_budgets(self, month: str) -> OperationResult:
        """Return every sub-budget of a month with its totals.

        Returns:
            OperationResult: list[BudgetWithExpenses] on success.
        """
        try:
            validate_month_key(month)
            budgets = self._repository.fetch_budgets(month)
            expenses = (
                self._repository.fetch_expenses([b.id for b in budgets])
                if budgets
                else []
            )
        except BudgetError as exc:
            self._logger.error(f"Error loading sub-budgets of {month}: {exc}")
            return OperationResult.failure(exc)
        return OperationResult.success(
            [summarize_budget(budget, expenses) for budget in budgets]
        )

    def add_budget(self, month: str, data: BudgetEntryInput) -> OperationResult:
        try:
            validate_month_key(month)
            payload = validate_budget_entry_input(data)
            budget = self._repository.insert_budget(month, payload)
        except BudgetError as exc:
            self._logger.error(f"Error adding sub-budget in {month}: {exc}")
            return OperationResult.failure(exc)
        return OperationResult.success(budget)

    def update_budget(
        self,
        budget_id: str,
        data: BudgetEntryInput,
    ) -> OperationResult:
        try:
            payload = validate_budget_entry_input(data)
            budget = self._repository.update_budget(budget_id, payload)
        except BudgetError as exc:
            self._logger.error(f"Error updating sub-budget {budget_id}: {exc}")
            return OperationResult.failure(exc)
        return OperationResult.success(budget)

    def delete_budget(self, budget_id: str) -> OperationResult:
        """Delete a sub-budget after its expenses.

        A failure on the second write leaves the expenses deleted and is
        reported as a PartialWriteFailure. An unknown id with no expenses
        is reported as NotFound.
        """
        try:
            removed = self._repository.delete_budget_expenses(budget_id)
        except StoreError as exc:
            self._logger.error(f"Error deleting sub-budget {budget_id}: {exc}")
            return OperationResult.failure(exc)
        try:
            self._repository.delete_budget(budget_id)
        except StoreError as exc:
            if isinstance(exc, NotFound) and removed == 0:
                self._logger.error(
                    f"Error deleting sub-budget {budget_id}: {exc}"
                )
                return OperationResult.failure(exc)
            error = PartialWriteFailure(
                "sub-budget delete",
                completed=1,
                cause=exc,
            )
            self._logger.error(
                f"Error deleting sub-budget {budget_id}: {error}"
            )
            return OperationResult.failure(error)
        self._logger.info(
            f"Deleted sub-budget {budget_id} with {removed} expenses"
        )
        return OperationResult.success()

    def add_expense(
        self,
        budget_id: str,
        data: BudgetExpenseInput,
    ) -> OperationResult:
        try:
            payload = validate_budget_expense_input(data)
            expense = self._repository.insert_expense(budget_id, payload)
        except BudgetError as exc:
            self._logger.error(
                f"Error adding expense to sub-budget {budget_id}: {exc}"
            )
            return OperationResult.failure(exc)
        return OperationResult.success(expense)

    def update_expense(
        self,
        expense_id: str,
        data: BudgetExpenseInput,
    ) -> OperationResult:
        try:
            payload = validate_budget_expense_input(data)
            expense = self._repository.update_expense(expense_id, payload)
        except BudgetError as exc:
            self._logger.error(
                f"Error updating sub-budget expense {expense_id}: {exc}"
            )
            return OperationResult.failure(exc)
        return OperationResult.success(expense)

    def delete_expense(self, expense_id: str) -> OperationResult:
        try:
            self._repository.delete_expense(expense_id)
        except BudgetError as exc:
            self._logger.error(
                f"Error deleting sub-budget expense {expense_id}: {exc}"
            )
            return OperationResult.failure(exc)
        return OperationResult.success()


__all__ = ["ManageSubBudgetsUseCase"]
