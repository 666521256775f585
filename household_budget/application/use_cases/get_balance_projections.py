"""Use case to project balance accounts for a month."""

from household_budget.application.ports.balance_repository import (
    BalanceRepositoryPort,
)
from household_budget.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from household_budget.application.use_cases.results import OperationResult
from household_budget.domain.errors import BudgetError
from household_budget.domain.services.balances import (
    balance_schedule,
    project_balance,
    summarize_projections,
)
from household_budget.domain.services.month_keys import (
    month_range,
    validate_month_key,
)
from household_budget.infrastructure.logging.logger import get_app_logger


class GetBalanceProjectionsUseCase:
    """Compute schedule and actual balances of every account."""

    def __init__(
        self,
        balance_repository: BalanceRepositoryPort,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            balance_repository: Port giving access to balance accounts.
            ledger_repository: Port giving access to paid linked expenses.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._balance_repository = balance_repository
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, month: str) -> OperationResult:
        """Return the BalanceOverview of every account at ``month``."""
        try:
            validate_month_key(month)
            accounts = self._balance_repository.fetch_accounts()
            payments = self._ledger_repository.fetch_account_payments()
            projections = [
                project_balance(account, month, payments)
                for account in accounts
            ]
            overview = summarize_projections(month, projections)
        except BudgetError as exc:
            self._logger.error(f"Error projecting balances for {month}: {exc}")
            return OperationResult.failure(exc)

        for projection in projections:
            if projection.status == "behind":
                self._logger.info(
                    f"Account {projection.account.name} is behind schedule "
                    f"by {-projection.difference} in {month}"
                )
        return OperationResult.success(overview)

    def schedule_grid(self, start: str, end: str) -> OperationResult:
        """Return schedule balances of every account over a month range.

        Returns:
            OperationResult: Mapping of account id to ScheduledBalance list.
        """
        try:
            months = month_range(start, end)
            accounts = self._balance_repository.fetch_accounts()
        except BudgetError as exc:
            self._logger.error(f"Error building balance grid: {exc}")
            return OperationResult.failure(exc)
        return OperationResult.success(
            {
                account.id: balance_schedule(account, months)
                for account in accounts
            }
        )


__all__ = ["GetBalanceProjectionsUseCase"]
