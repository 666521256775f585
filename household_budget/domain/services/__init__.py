"""Domain services package."""

from .balances import (
    actual_balance,
    balance_schedule,
    build_history_entry,
    estimated_payoff_month,
    months_remaining,
    progress_percentage,
    project_balance,
    schedule_balance,
    summarize_projections,
    total_paid,
)
from .budget import (
    build_monthly_view,
    compute_household_summary,
    compute_member_summary,
    effective_expense_amount,
    expenses_by_category,
    sorted_category_totals,
    vat_amount,
)
from .carry_over import clone_month, default_selection, expense_to_input
from .month_keys import (
    add_months,
    compare_month_keys,
    current_month_key,
    format_month_key,
    format_month_label,
    month_range,
    months_between,
    months_elapsed,
    next_month,
    parse_month_key,
    previous_month,
    validate_month_key,
)
from .statements import build_statement_key
from .sub_budgets import summarize_budget
from .validation import (
    parse_amount,
    validate_balance_account_input,
    validate_budget_entry_input,
    validate_budget_expense_input,
    validate_ledger_input,
)

__all__ = [
    "actual_balance",
    "balance_schedule",
    "build_history_entry",
    "estimated_payoff_month",
    "months_remaining",
    "progress_percentage",
    "project_balance",
    "schedule_balance",
    "summarize_projections",
    "total_paid",
    "build_monthly_view",
    "compute_household_summary",
    "compute_member_summary",
    "effective_expense_amount",
    "expenses_by_category",
    "sorted_category_totals",
    "vat_amount",
    "clone_month",
    "default_selection",
    "expense_to_input",
    "add_months",
    "compare_month_keys",
    "current_month_key",
    "format_month_key",
    "format_month_label",
    "month_range",
    "months_between",
    "months_elapsed",
    "next_month",
    "parse_month_key",
    "previous_month",
    "validate_month_key",
    "build_statement_key",
    "summarize_budget",
    "parse_amount",
    "validate_balance_account_input",
    "validate_budget_entry_input",
    "validate_budget_expense_input",
    "validate_ledger_input",
]
