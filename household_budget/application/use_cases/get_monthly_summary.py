"""Use case to aggregate a month's ledger into household summaries."""

from household_budget.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from household_budget.application.use_cases.results import OperationResult
from household_budget.domain.errors import BudgetError
from household_budget.domain.services.budget import build_monthly_view
from household_budget.domain.services.month_keys import validate_month_key
from household_budget.infrastructure.logging.logger import get_app_logger


class GetMonthlySummaryUseCase:
    """Compute member, household, and category totals for a month."""

    def __init__(self, ledger_repository: LedgerRepositoryPort, logger=None):
        """Initialize the use case.

        Args:
            ledger_repository: Port giving access to ledger rows.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, month: str) -> OperationResult:
        """Return the MonthlyBudgetView of a month.

        Args:
            month: MonthKey to summarize.

        Returns:
            OperationResult: MonthlyBudgetView on success.
        """
        try:
            validate_month_key(month)
            ledger = self._ledger_repository.fetch_month(month)
        except BudgetError as exc:
            self._logger.error(f"Error summarizing {month}: {exc}")
            return OperationResult.failure(exc)

        view = build_monthly_view(ledger)
        self._logger.info(
            f"Summarized {ledger.row_count} rows for {month}: "
            f"remaining={view.household.remaining_balance}"
        )
        return OperationResult.success(view)


__all__ = ["GetMonthlySummaryUseCase"]
