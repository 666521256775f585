"""Domain constants for household budgeting."""

from decimal import Decimal

MEMBERS = ("Nikkie", "Hein")

INCOME_TYPE_SALARY = "Salary"
INCOME_TYPE_OTHER = "Other"
INCOME_TYPES = (INCOME_TYPE_SALARY, INCOME_TYPE_OTHER)

EXPENSE_CATEGORIES = (
    "Housing",
    "Utilities",
    "Groceries",
    "Transportation",
    "Healthcare",
    "Entertainment",
    "Dining",
    "Shopping",
    "Education",
    "Insurance",
    "Savings",
    "Other",
)

VAT_RATE = Decimal("0.15")

# Ledger kinds double as their table names.
INCOMES = "incomes"
TAXES = "taxes"
EXPENSES = "expenses"
DISCRETIONARY = "unnecessary_expenses"
LEDGER_KINDS = (INCOMES, TAXES, EXPENSES, DISCRETIONARY)
# Kinds copied by the automatic month carry-over, in insert order.
CARRY_OVER_KINDS = (INCOMES, TAXES, EXPENSES)

MAX_STATEMENT_BYTES = 50 * 1024 * 1024
ALLOWED_STATEMENT_TYPES = (
    "application/pdf",
    "image/png",
    "image/jpeg",
    "image/jpg",
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "text/csv",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
)


__all__ = [
    "MEMBERS",
    "INCOME_TYPE_SALARY",
    "INCOME_TYPE_OTHER",
    "INCOME_TYPES",
    "EXPENSE_CATEGORIES",
    "VAT_RATE",
    "INCOMES",
    "TAXES",
    "EXPENSES",
    "DISCRETIONARY",
    "LEDGER_KINDS",
    "CARRY_OVER_KINDS",
    "MAX_STATEMENT_BYTES",
    "ALLOWED_STATEMENT_TYPES",
]
