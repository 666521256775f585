"""CLI adapter to load a month and auto-carry the previous month into it.

The month defaults to the current one; set ``BUDGET_MONTH`` (YYYY-MM) to
pick another.
"""

import os

from household_budget.application.use_cases.carry_over import (
    CarryOverOrchestrator,
)
from household_budget.domain.services.month_keys import current_month_key
from household_budget.infrastructure.container import build_ledger_repository
from household_budget.infrastructure.logging.logger import get_app_logger


def _selected_month() -> str:
    return os.getenv("BUDGET_MONTH", "").strip() or current_month_key()


def main() -> None:
    """Select the month and report what the carry-over did."""
    logger = get_app_logger()
    orchestrator = CarryOverOrchestrator(
        ledger_repository=build_ledger_repository(),
        logger=logger,
    )
    month = _selected_month()

    result = orchestrator.select_month(month)

    if not result.ok:
        print(f"Loading {month} failed: {result.error}")
        raise SystemExit(1)
    if result.auto_carried:
        print(f"Carried {result.carried_count} rows into {month}.")
    else:
        print(
            f"{month} loaded with {result.ledger.row_count} rows; "
            f"nothing carried over."
        )


if __name__ == "__main__":  # pragma: no cover
    main()
