"""Domain models package."""

from .balances import (
    BalanceAccount,
    BalanceHistoryEntry,
    BalanceOverview,
    BalanceProjection,
    ScheduledBalance,
)
from .inputs import (
    BalanceAccountInput,
    BudgetEntryInput,
    BudgetExpenseInput,
    DiscretionaryInput,
    ExpenseInput,
    IncomeInput,
    LedgerInput,
    StatementUpload,
    TaxInput,
)
from .ledger import DiscretionaryExpense, Expense, Income, MonthLedger, Tax
from .statements import FinancialStatement
from .sub_budgets import BudgetEntry, BudgetExpense, BudgetWithExpenses
from .summaries import (
    CategoryTotal,
    HouseholdSummary,
    MemberSummary,
    MonthlyBudgetView,
)

__all__ = [
    "BalanceAccount",
    "BalanceHistoryEntry",
    "BalanceOverview",
    "BalanceProjection",
    "ScheduledBalance",
    "BalanceAccountInput",
    "BudgetEntryInput",
    "BudgetExpenseInput",
    "DiscretionaryInput",
    "ExpenseInput",
    "IncomeInput",
    "LedgerInput",
    "StatementUpload",
    "TaxInput",
    "DiscretionaryExpense",
    "Expense",
    "Income",
    "MonthLedger",
    "Tax",
    "FinancialStatement",
    "BudgetEntry",
    "BudgetExpense",
    "BudgetWithExpenses",
    "CategoryTotal",
    "HouseholdSummary",
    "MemberSummary",
    "MonthlyBudgetView",
]
