"""CLI adapter printing the household summary and balance overview.

Reads ``BUDGET_MONTH`` (YYYY-MM), defaulting to the current month.
"""

import os

from household_budget.application.use_cases.get_balance_projections import (
    GetBalanceProjectionsUseCase,
)
from household_budget.application.use_cases.get_monthly_summary import (
    GetMonthlySummaryUseCase,
)
from household_budget.domain.services.month_keys import (
    current_month_key,
    format_month_label,
)
from household_budget.infrastructure.container import (
    build_balance_repository,
    build_database_adapter,
    build_ledger_repository,
)
from household_budget.infrastructure.logging.logger import get_app_logger


def _format_lines(view, overview) -> list[str]:
    household = view.household
    lines = [
        f"Budget for {format_month_label(view.month)}",
        f"  Total income:    {household.total_income:>12,.2f}",
        f"  Taxes:           {household.total_taxes:>12,.2f}",
        f"  Net income:      {household.net_income:>12,.2f}",
        f"  Expenses:        {household.total_expenses:>12,.2f}",
        f"  Discretionary:   {household.total_discretionary:>12,.2f}",
        f"  Remaining:       {household.remaining_balance:>12,.2f}",
    ]
    for member, summary in household.member_summaries.items():
        lines.append(f"  {member}: remaining {summary.remaining_balance:,.2f}")
    if view.categories:
        lines.append("Expenses by category")
        lines.extend(
            f"  {item.category:<16}{item.amount:>12,.2f}"
            for item in view.categories
        )
    if overview.projections:
        lines.append("Balance accounts")
        for projection in overview.projections:
            lines.append(
                f"  {projection.account.name}: "
                f"actual {projection.actual_balance:,.2f}, "
                f"schedule {projection.schedule_balance:,.2f} "
                f"({projection.status})"
            )
        lines.append(f"  Overall progress: {overview.overall_progress:.1f}%")
    return lines


def main() -> None:
    """Print the monthly summary of ``BUDGET_MONTH``."""
    logger = get_app_logger()
    month = os.getenv("BUDGET_MONTH", "").strip() or current_month_key()
    db_adapter = build_database_adapter()
    ledger_repository = build_ledger_repository(db_adapter)

    summary = GetMonthlySummaryUseCase(ledger_repository, logger=logger)
    projections = GetBalanceProjectionsUseCase(
        build_balance_repository(db_adapter),
        ledger_repository,
        logger=logger,
    )

    view_result = summary.execute(month)
    overview_result = projections.execute(month)
    for result in (view_result, overview_result):
        if not result.ok:
            print(f"Could not summarize {month}: {result.error}")
            raise SystemExit(1)

    print("\n".join(_format_lines(view_result.value, overview_result.value)))


if __name__ == "__main__":  # pragma: no cover
    main()
