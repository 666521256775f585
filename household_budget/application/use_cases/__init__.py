"""Application use cases package."""

from .carry_over import CarryOverOrchestrator, CarryOverResult, MonthLoadResult
from .financial_statements import FinancialStatementsUseCase
from .get_balance_projections import GetBalanceProjectionsUseCase
from .get_monthly_summary import GetMonthlySummaryUseCase
from .manage_balance_accounts import ManageBalanceAccountsUseCase
from .manage_ledger import ManageLedgerUseCase
from .manage_sub_budgets import ManageSubBudgetsUseCase
from .results import OperationResult

__all__ = [
    "CarryOverOrchestrator",
    "CarryOverResult",
    "MonthLoadResult",
    "FinancialStatementsUseCase",
    "GetBalanceProjectionsUseCase",
    "GetMonthlySummaryUseCase",
    "ManageBalanceAccountsUseCase",
    "ManageLedgerUseCase",
    "ManageSubBudgetsUseCase",
    "OperationResult",
]
