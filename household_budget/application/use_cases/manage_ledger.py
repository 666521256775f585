"""Use case for adding, editing, and deleting ledger rows."""

from dataclasses import replace

from household_budget.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from household_budget.application.use_cases.results import OperationResult
from household_budget.domain.constants import EXPENSES
from household_budget.domain.errors import BudgetError
from household_budget.domain.models import Expense, LedgerInput
from household_budget.domain.services.carry_over import expense_to_input
from household_budget.domain.services.month_keys import validate_month_key
from household_budget.domain.services.validation import validate_ledger_input
from household_budget.infrastructure.logging.logger import get_app_logger


class ManageLedgerUseCase:
    """Validate and persist changes to incomes, taxes, and expenses.

    Failed mutations leave the store untouched and are reported through
    the returned OperationResult.
    """

    def __init__(self, ledger_repository: LedgerRepositoryPort, logger=None):
        """Initialize the use case.

        Args:
            ledger_repository: Port giving access to ledger rows.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def add_entry(
        self,
        kind: str,
        month: str,
        data: LedgerInput,
    ) -> OperationResult:
        """Insert a row of ``kind`` into ``month``."""
        try:
            validate_month_key(month)
            payload = validate_ledger_input(kind, data)
            entry = self._ledger_repository.insert_entry(kind, month, payload)
        except BudgetError as exc:
            self._logger.error(f"Error adding {kind} row in {month}: {exc}")
            return OperationResult.failure(exc)
        return OperationResult.success(entry)

    def update_entry(
        self,
        kind: str,
        entry_id: str,
        data: LedgerInput,
    ) -> OperationResult:
        """Replace the editable fields of a row."""
        try:
            payload = validate_ledger_input(kind, data)
            entry = self._ledger_repository.update_entry(
                kind,
                entry_id,
                payload,
            )
        except BudgetError as exc:
            self._logger.error(f"Error updating {kind} row {entry_id}: {exc}")
            return OperationResult.failure(exc)
        return OperationResult.success(entry)

    def delete_entry(self, kind: str, entry_id: str) -> OperationResult:
        """Delete a row."""
        try:
            self._ledger_repository.delete_entry(kind, entry_id)
        except BudgetError as exc:
            self._logger.error(f"Error deleting {kind} row {entry_id}: {exc}")
            return OperationResult.failure(exc)
        return OperationResult.success()

    def set_expense_paid(
        self,
        expense: Expense,
        is_paid: bool,
    ) -> OperationResult:
        """Mark an expense as paid or unpaid, keeping every other field."""
        payload = replace(expense_to_input(expense), is_paid=is_paid)
        return self.update_entry(EXPENSES, expense.id, payload)


__all__ = ["ManageLedgerUseCase"]
