"""Domain package for household budgeting rules and core models."""

from .constants import (
    CARRY_OVER_KINDS,
    DISCRETIONARY,
    EXPENSE_CATEGORIES,
    EXPENSES,
    INCOMES,
    LEDGER_KINDS,
    MEMBERS,
    TAXES,
    VAT_RATE,
)
from .errors import (
    BudgetError,
    FormatError,
    NotFound,
    PartialWriteFailure,
    StoreError,
    StoreUnavailable,
)

__all__ = [
    "CARRY_OVER_KINDS",
    "DISCRETIONARY",
    "EXPENSE_CATEGORIES",
    "EXPENSES",
    "INCOMES",
    "LEDGER_KINDS",
    "MEMBERS",
    "TAXES",
    "VAT_RATE",
    "BudgetError",
    "FormatError",
    "NotFound",
    "PartialWriteFailure",
    "StoreError",
    "StoreUnavailable",
]
