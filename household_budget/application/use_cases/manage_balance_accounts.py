"""Use case for maintaining balance accounts and their history."""

from household_budget.application.ports.balance_repository import (
    BalanceRepositoryPort,
)
from household_budget.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from household_budget.application.use_cases.results import OperationResult
from household_budget.domain.errors import (
    BudgetError,
    PartialWriteFailure,
    StoreError,
)
from household_budget.domain.models import BalanceAccountInput
from household_budget.domain.services.balances import build_history_entry
from household_budget.domain.services.month_keys import validate_month_key
from household_budget.domain.services.validation import (
    validate_balance_account_input,
)
from household_budget.infrastructure.logging.logger import get_app_logger


class ManageBalanceAccountsUseCase:
    """Create, edit, and delete balance accounts."""

    def __init__(
        self,
        balance_repository: BalanceRepositoryPort,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            balance_repository: Port giving access to balance accounts.
            ledger_repository: Port used to detach expenses on delete.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._balance_repository = balance_repository
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def add_account(self, data: BalanceAccountInput) -> OperationResult:
        """Create an account."""
        try:
            payload = validate_balance_account_input(data)
            account = self._balance_repository.insert_account(payload)
        except BudgetError as exc:
            self._logger.error(f"Error adding balance account: {exc}")
            return OperationResult.failure(exc)
        return OperationResult.success(account)

    def update_account(
        self,
        account_id: str,
        data: BalanceAccountInput,
    ) -> OperationResult:
        """Replace an account's fields.

        Changing the initial balance or the deduction changes every past
        projection; history rows already recorded are left as they are.
        """
        try:
            payload = validate_balance_account_input(data)
            account = self._balance_repository.update_account(
                account_id,
                payload,
            )
        except BudgetError as exc:
            self._logger.error(
                f"Error updating balance account {account_id}: {exc}"
            )
            return OperationResult.failure(exc)
        return OperationResult.success(account)

    def delete_account(self, account_id: str) -> OperationResult:
        """Delete an account, its history, and its links from expenses.

        Referencing expenses are kept with ``balance_account_id`` cleared.
        The three steps are separate writes; a failure after the first is
        reported as a PartialWriteFailure and nothing is reverted. A missing
        account is reported as NotFound before any write.
        """
        completed = 0
        try:
            self._balance_repository.fetch_account(account_id)
            detached = self._ledger_repository.detach_balance_account(
                account_id
            )
            completed += 1
            removed = self._balance_repository.delete_history(account_id)
            completed += 1
            self._balance_repository.delete_account(account_id)
        except StoreError as exc:
            error = (
                exc
                if completed == 0
                else PartialWriteFailure(
                    "balance account delete",
                    completed=completed,
                    cause=exc,
                )
            )
            self._logger.error(
                f"Error deleting balance account {account_id}: {error}"
            )
            return OperationResult.failure(error)
        self._logger.info(
            f"Deleted balance account {account_id}: detached {detached} "
            f"expenses, removed {removed} history rows"
        )
        return OperationResult.success()

    def record_history(self, account_id: str, month: str) -> OperationResult:
        """Snapshot the scheduled opening, deduction, and closing of a month."""
        try:
            validate_month_key(month)
            account = self._balance_repository.fetch_account(account_id)
            opening, deduction, closing = build_history_entry(account, month)
            entry = self._balance_repository.insert_history(
                account_id,
                month,
                opening,
                deduction,
                closing,
            )
        except BudgetError as exc:
            self._logger.error(
                f"Error recording history of {account_id} for {month}: {exc}"
            )
            return OperationResult.failure(exc)
        return OperationResult.success(entry)

    def list_history(self, account_id: str | None = None) -> OperationResult:
        """Return recorded history rows, newest month first."""
        try:
            history = self._balance_repository.fetch_history(account_id)
        except BudgetError as exc:
            self._logger.error(f"Error loading balance history: {exc}")
            return OperationResult.failure(exc)
        return OperationResult.success(history)


__all__ = ["ManageBalanceAccountsUseCase"]
