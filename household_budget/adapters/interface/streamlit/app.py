"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import altair as alt
import streamlit as st

from household_budget.application.use_cases.carry_over import (
    CarryOverOrchestrator,
    MonthLoadResult,
)
from household_budget.application.use_cases.get_balance_projections import (
    GetBalanceProjectionsUseCase,
)
from household_budget.application.use_cases.results import OperationResult
from household_budget.domain.errors import BudgetError
from household_budget.domain.models import (
    BalanceOverview,
    CategoryTotal,
    Expense,
    HouseholdSummary,
)
from household_budget.domain.services.budget import build_monthly_view
from household_budget.domain.services.month_keys import (
    add_months,
    format_month_label,
    month_key_from_date,
)
from household_budget.infrastructure.container import (
    build_balance_repository,
    build_database_adapter,
    build_ledger_repository,
)
from household_budget.infrastructure.logging.logger import get_usage_logger

_ORCHESTRATOR_KEY = "carry_over_orchestrator"
_LAST_MONTH_KEY = "last_selected_month"
_CARRY_NOTICE_KEY = "carry_over_notice"


def _get_orchestrator() -> CarryOverOrchestrator:
    """Return the orchestrator of this browser session."""
    if _ORCHESTRATOR_KEY not in st.session_state:
        st.session_state[_ORCHESTRATOR_KEY] = CarryOverOrchestrator(
            ledger_repository=build_ledger_repository()
        )
    return st.session_state[_ORCHESTRATOR_KEY]


def _fetch_balance_overview(month: str) -> OperationResult:
    """Fetch balance projections of every account for a month."""
    db_adapter = build_database_adapter()
    use_case = GetBalanceProjectionsUseCase(
        balance_repository=build_balance_repository(db_adapter),
        ledger_repository=build_ledger_repository(db_adapter),
    )
    return use_case.execute(month)


def _month_options(today: date, past: int = 12, future: int = 3) -> list[str]:
    """Return month keys around today, newest first."""
    current = month_key_from_date(today)
    return [
        add_months(current, offset)
        for offset in range(future, -past - 1, -1)
    ]


def _log_month_selection(month: str) -> None:
    """Record a month change on the usage log."""
    if st.session_state.get(_LAST_MONTH_KEY) != month:
        st.session_state[_LAST_MONTH_KEY] = month
        get_usage_logger().info(f"Month selected: {month}")


def _format_currency(value: Decimal) -> str:
    """Format rand amounts for display."""
    sign = "-" if value < 0 else ""
    return f"{sign}R {abs(value):,.2f}"


def _render_summary_metrics(household: HouseholdSummary) -> None:
    income_col, taxes_col, expenses_col, remaining_col = st.columns(4)
    income_col.metric("Total Income", _format_currency(household.total_income))
    taxes_col.metric("Taxes", _format_currency(household.total_taxes))
    expenses_col.metric(
        "Expenses",
        _format_currency(
            household.total_expenses + household.total_discretionary
        ),
    )
    remaining_col.metric(
        "Remaining",
        _format_currency(household.remaining_balance),
    )

    data = [
        {
            "Member": member,
            "Net income": _format_currency(summary.net_income),
            "Expenses": _format_currency(summary.total_expenses),
            "Discretionary": _format_currency(summary.total_discretionary),
            "Remaining": _format_currency(summary.remaining_balance),
        }
        for member, summary in household.member_summaries.items()
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _prepare_category_chart_data(
    categories: Sequence[CategoryTotal],
) -> list[dict[str, str | float]]:
    """Prepare Altair-ready rows with amount and share labels.

    Args:
        categories: Category totals, largest first.

    Returns:
        list[dict[str, str | float]]: One row per non-zero category.
    """
    total = sum((item.amount for item in categories), start=Decimal("0"))
    data: list[dict[str, str | float]] = []
    for item in categories:
        if item.amount == 0:
            continue
        share = item.amount / total * Decimal("100") if total else Decimal("0")
        data.append(
            {
                "category": item.category,
                "amount": float(item.amount),
                "amount_label": _format_currency(item.amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def _render_category_chart(
    categories: Sequence[CategoryTotal],
    chart_size: int = 320,
) -> None:
    """Render a donut chart of expenses by category."""
    st.subheader("Expenses by Category")
    data = _prepare_category_chart_data(categories)
    if not data:
        st.info("No expenses recorded for this month.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.35,
        cornerRadius=6,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            legend=alt.Legend(orient="bottom", title=None, columns=3),
        ),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(
        width=chart_size,
        height=chart_size,
    )
    st.altair_chart(chart, width="stretch")


def _projection_rows(overview: BalanceOverview) -> list[dict[str, str]]:
    rows = []
    for projection in overview.projections:
        payoff = projection.estimated_payoff_month
        rows.append(
            {
                "Account": projection.account.name,
                "Schedule": _format_currency(projection.schedule_balance),
                "Actual": _format_currency(projection.actual_balance),
                "Paid": _format_currency(projection.total_paid),
                "Difference": _format_currency(projection.difference),
                "Status": projection.status.replace("_", " "),
                "Progress": f"{projection.progress_percentage:.1f}%",
                "Payoff": format_month_label(payoff) if payoff else "n/a",
            }
        )
    return rows


def _render_balance_projections(result: OperationResult) -> None:
    st.subheader("Balance Accounts")
    if not result.ok:
        st.error(f"Could not load balance accounts: {result.error}")
        return
    overview: BalanceOverview = result.value
    if not overview.projections:
        st.info("No balance accounts yet.")
        return
    total_col, paid_col, progress_col = st.columns(3)
    total_col.metric(
        "Outstanding",
        _format_currency(overview.total_actual_balance),
    )
    paid_col.metric("Paid off", _format_currency(overview.total_paid_off))
    progress_col.metric("Progress", f"{overview.overall_progress:.1f}%")
    st.dataframe(_projection_rows(overview), width="stretch", hide_index=True)


def _expense_label(expense: Expense) -> str:
    flag = " (recurring)" if expense.is_recurring else ""
    return (
        f"{expense.description} · {expense.member} · "
        f"{_format_currency(expense.amount)}{flag}"
    )


def _render_carry_over(
    orchestrator: CarryOverOrchestrator,
    month: str,
) -> None:
    """Offer the previous month's expenses for carry-over."""
    st.subheader("Carry Over Expenses")
    notice = st.session_state.pop(_CARRY_NOTICE_KEY, None)
    if notice:
        st.success(notice)
    try:
        expenses = orchestrator.previous_month_expenses(month)
    except BudgetError as exc:
        st.error(f"Could not load last month's expenses: {exc}")
        return
    if not expenses:
        st.caption("No expenses last month to carry over.")
        return

    by_id = {expense.id: expense for expense in expenses}
    preselected = orchestrator.default_selection(expenses)
    selected = st.multiselect(
        "Expenses to copy",
        options=list(by_id),
        default=[item for item in by_id if item in preselected],
        format_func=lambda expense_id: _expense_label(by_id[expense_id]),
    )
    if not st.button("Carry over", disabled=not selected):
        return
    result = orchestrator.carry_over_expenses(
        month,
        [by_id[expense_id] for expense_id in selected],
    )
    get_usage_logger().info(
        f"Carry-over into {month}: {len(result.inserted)} expenses"
    )
    if not result.ok:
        st.error(f"Carry-over stopped: {result.error}")
        return
    st.session_state[_CARRY_NOTICE_KEY] = (
        f"Copied {len(result.inserted)} expenses into {month}."
    )
    st.rerun()


def _render_month(load: MonthLoadResult) -> None:
    if load.auto_carried:
        st.info(
            f"Copied {load.carried_count} rows from the previous month."
        )
    view = build_monthly_view(load.ledger)
    _render_summary_metrics(view.household)
    _render_category_chart(view.categories)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Household Budget", layout="wide")
    st.title("Household Budget")

    months = _month_options(date.today())
    month = st.sidebar.selectbox(
        "Month",
        months,
        index=months.index(month_key_from_date(date.today())),
        format_func=format_month_label,
    )
    _log_month_selection(month)

    orchestrator = _get_orchestrator()
    load = orchestrator.select_month(month)
    if not load.ok:
        st.error(f"Could not load {format_month_label(month)}: {load.error}")
        return

    _render_month(load)
    _render_balance_projections(_fetch_balance_overview(month))
    _render_carry_over(orchestrator, month)


if __name__ == "__main__":  # pragma: no cover
    main()
