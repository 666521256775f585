"""Request structs carrying the user-editable fields of each entity kind.

Identity, creation timestamps, and the owning month are never part of an
input; the store or the calling use case assigns them.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class IncomeInput:
    """Fields for creating or replacing an income row."""

    member: str
    income_type: str
    description: str
    amount: Decimal


@dataclass(frozen=True)
class TaxInput:
    """Fields for creating or replacing a tax row."""

    member: str
    description: str
    amount: Decimal


@dataclass(frozen=True)
class ExpenseInput:
    """Fields for creating or replacing an expense row."""

    member: str
    category: str
    description: str
    amount: Decimal
    is_shared: bool = False
    is_recurring: bool = False
    is_paid: bool = False
    include_vat: bool = False
    note: str | None = None
    balance_account_id: str | None = None


@dataclass(frozen=True)
class DiscretionaryInput:
    """Fields for creating or replacing a discretionary expense row."""

    member: str
    description: str
    amount: Decimal
    note: str | None = None


@dataclass(frozen=True)
class BalanceAccountInput:
    """Fields for creating or replacing a balance account."""

    name: str
    description: str
    initial_balance: Decimal
    monthly_deduction: Decimal
    start_month: str


@dataclass(frozen=True)
class BudgetEntryInput:
    """Fields for creating or replacing a sub-budget."""

    name: str
    description: str
    budget_amount: Decimal
    member: str
    category: str


@dataclass(frozen=True)
class BudgetExpenseInput:
    """Fields for creating or replacing a sub-budget expense."""

    description: str
    amount: Decimal
    date: date


@dataclass(frozen=True)
class StatementUpload:
    """A financial document to upload for a month."""

    filename: str
    content: bytes
    content_type: str
    uploaded_by: str
    notes: str = ""


LedgerInput = IncomeInput | TaxInput | ExpenseInput | DiscretionaryInput


__all__ = [
    "IncomeInput",
    "TaxInput",
    "ExpenseInput",
    "DiscretionaryInput",
    "BalanceAccountInput",
    "BudgetEntryInput",
    "BudgetExpenseInput",
    "StatementUpload",
    "LedgerInput",
]
