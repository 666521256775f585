"""Shared fakes and fixtures for the household budget tests."""

from dataclasses import asdict, replace
from datetime import datetime
from decimal import Decimal
from itertools import count
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine

from household_budget.domain.constants import (
    DISCRETIONARY,
    EXPENSES,
    INCOMES,
    LEDGER_KINDS,
    TAXES,
)
from household_budget.domain.errors import NotFound, StoreError
from household_budget.domain.models import (
    BalanceAccount,
    BalanceHistoryEntry,
    BudgetEntry,
    BudgetExpense,
    DiscretionaryExpense,
    Expense,
    FinancialStatement,
    Income,
    MonthLedger,
    Tax,
)
from household_budget.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from household_budget.infrastructure.schema import create_schema

_MODELS = {
    INCOMES: Income,
    TAXES: Tax,
    EXPENSES: Expense,
    DISCRETIONARY: DiscretionaryExpense,
}

_CREATED_AT = datetime(2025, 1, 1, 12, 0, 0)


class FakeLedgerRepository:
    """In-memory ledger store with failure injection.

    ``fail_fetch_months`` makes fetches of those months raise;
    ``fail_insert_kinds`` makes inserts of those kinds raise.
    """

    def __init__(self) -> None:
        self.rows = {kind: [] for kind in LEDGER_KINDS}
        self.fail_fetch_months: set[str] = set()
        self.fail_insert_kinds: set[str] = set()
        self.fail_after_inserts: int | None = None
        self.insert_calls: list[tuple[str, str, int]] = []
        self.fetch_calls: list[str] = []
        self._ids = count(1)

    def seed(self, kind: str, month: str, data):
        return self._create(kind, month, data)

    def fetch_month(self, month: str) -> MonthLedger:
        self.fetch_calls.append(month)
        if month in self.fail_fetch_months:
            raise StoreError(f"cannot read {month}")
        return MonthLedger(
            month=month,
            incomes=self.fetch_entries(INCOMES, month),
            taxes=self.fetch_entries(TAXES, month),
            expenses=self.fetch_entries(EXPENSES, month),
            discretionary=self.fetch_entries(DISCRETIONARY, month),
        )

    def fetch_entries(self, kind: str, month: str) -> list:
        if month in self.fail_fetch_months:
            raise StoreError(f"cannot read {month}")
        return [row for row in self.rows[kind] if row.month == month]

    def insert_entry(self, kind: str, month: str, data):
        return self.insert_entries(kind, month, [data])[0]

    def insert_entries(self, kind: str, month: str, rows: list) -> list:
        if kind in self.fail_insert_kinds:
            raise StoreError(f"cannot write {kind}")
        if self.fail_after_inserts is not None:
            if len(self.insert_calls) >= self.fail_after_inserts:
                raise StoreError("store went away")
        self.insert_calls.append((kind, month, len(rows)))
        return [self._create(kind, month, data) for data in rows]

    def update_entry(self, kind: str, entry_id: str, data):
        for index, row in enumerate(self.rows[kind]):
            if row.id == entry_id:
                updated = replace(row, **asdict(data))
                self.rows[kind][index] = updated
                return updated
        raise NotFound(kind, entry_id)

    def delete_entry(self, kind: str, entry_id: str) -> None:
        before = len(self.rows[kind])
        self.rows[kind] = [r for r in self.rows[kind] if r.id != entry_id]
        if len(self.rows[kind]) == before:
            raise NotFound(kind, entry_id)

    def fetch_account_payments(self) -> list[Expense]:
        return [
            row
            for row in self.rows[EXPENSES]
            if row.balance_account_id is not None and row.is_paid
        ]

    def detach_balance_account(self, account_id: str) -> int:
        detached = 0
        for index, row in enumerate(self.rows[EXPENSES]):
            if row.balance_account_id == account_id:
                self.rows[EXPENSES][index] = replace(
                    row,
                    balance_account_id=None,
                )
                detached += 1
        return detached

    def _create(self, kind: str, month: str, data):
        entity = _MODELS[kind](
            id=f"{kind}-{next(self._ids)}",
            month=month,
            created_at=_CREATED_AT,
            **asdict(data),
        )
        self.rows[kind].append(entity)
        return entity


class FakeBalanceRepository:
    """In-memory balance account store."""

    def __init__(self) -> None:
        self.accounts: dict[str, BalanceAccount] = {}
        self.history: list[BalanceHistoryEntry] = []
        self.fail_on: dict[str, Exception] = {}
        self._ids = count(1)

    def _maybe_fail(self, name: str) -> None:
        if name in self.fail_on:
            raise self.fail_on[name]

    def add(self, account: BalanceAccount) -> BalanceAccount:
        self.accounts[account.id] = account
        return account

    def fetch_accounts(self) -> list[BalanceAccount]:
        self._maybe_fail("fetch_accounts")
        return sorted(self.accounts.values(), key=lambda a: a.name)

    def fetch_account(self, account_id: str) -> BalanceAccount:
        if account_id not in self.accounts:
            raise NotFound("balance_accounts", account_id)
        return self.accounts[account_id]

    def insert_account(self, data) -> BalanceAccount:
        account = BalanceAccount(
            id=f"account-{next(self._ids)}",
            created_at=_CREATED_AT,
            **asdict(data),
        )
        return self.add(account)

    def update_account(self, account_id: str, data) -> BalanceAccount:
        account = self.fetch_account(account_id)
        updated = replace(account, **asdict(data))
        self.accounts[account_id] = updated
        return updated

    def delete_account(self, account_id: str) -> None:
        self._maybe_fail("delete_account")
        if self.accounts.pop(account_id, None) is None:
            raise NotFound("balance_accounts", account_id)

    def fetch_history(self, account_id=None) -> list[BalanceHistoryEntry]:
        return [
            entry
            for entry in sorted(
                self.history,
                key=lambda e: e.month,
                reverse=True,
            )
            if account_id is None or entry.account_id == account_id
        ]

    def insert_history(
        self,
        account_id,
        month,
        opening_balance,
        deduction,
        closing_balance,
    ) -> BalanceHistoryEntry:
        entry = BalanceHistoryEntry(
            id=f"history-{next(self._ids)}",
            account_id=account_id,
            month=month,
            opening_balance=opening_balance,
            deduction=deduction,
            closing_balance=closing_balance,
            created_at=_CREATED_AT,
        )
        self.history.append(entry)
        return entry

    def delete_history(self, account_id: str) -> int:
        self._maybe_fail("delete_history")
        before = len(self.history)
        self.history = [e for e in self.history if e.account_id != account_id]
        return before - len(self.history)


class FakeSubBudgetRepository:
    """In-memory sub-budget store."""

    def __init__(self) -> None:
        self.budgets: dict[str, BudgetEntry] = {}
        self.expenses: dict[str, BudgetExpense] = {}
        self.fail_on: dict[str, Exception] = {}
        self.fetch_expense_calls: list[list[str]] = []
        self._ids = count(1)

    def _maybe_fail(self, name: str) -> None:
        if name in self.fail_on:
            raise self.fail_on[name]

    def fetch_budgets(self, month: str) -> list[BudgetEntry]:
        return [b for b in self.budgets.values() if b.month == month]

    def insert_budget(self, month: str, data) -> BudgetEntry:
        budget = BudgetEntry(
            id=f"budget-{next(self._ids)}",
            month=month,
            created_at=_CREATED_AT,
            **asdict(data),
        )
        self.budgets[budget.id] = budget
        return budget

    def update_budget(self, budget_id: str, data) -> BudgetEntry:
        if budget_id not in self.budgets:
            raise NotFound("budget_entries", budget_id)
        updated = replace(self.budgets[budget_id], **asdict(data))
        self.budgets[budget_id] = updated
        return updated

    def delete_budget(self, budget_id: str) -> None:
        self._maybe_fail("delete_budget")
        if self.budgets.pop(budget_id, None) is None:
            raise NotFound("budget_entries", budget_id)

    def fetch_expenses(self, budget_ids: list[str]) -> list[BudgetExpense]:
        self.fetch_expense_calls.append(list(budget_ids))
        return [e for e in self.expenses.values() if e.budget_id in budget_ids]

    def insert_expense(self, budget_id: str, data) -> BudgetExpense:
        expense = BudgetExpense(
            id=f"expense-{next(self._ids)}",
            budget_id=budget_id,
            created_at=_CREATED_AT,
            **asdict(data),
        )
        self.expenses[expense.id] = expense
        return expense

    def update_expense(self, expense_id: str, data) -> BudgetExpense:
        if expense_id not in self.expenses:
            raise NotFound("budget_expenses", expense_id)
        updated = replace(self.expenses[expense_id], **asdict(data))
        self.expenses[expense_id] = updated
        return updated

    def delete_expense(self, expense_id: str) -> None:
        if self.expenses.pop(expense_id, None) is None:
            raise NotFound("budget_expenses", expense_id)

    def delete_budget_expenses(self, budget_id: str) -> int:
        self._maybe_fail("delete_budget_expenses")
        doomed = [
            key
            for key, expense in self.expenses.items()
            if expense.budget_id == budget_id
        ]
        for key in doomed:
            del self.expenses[key]
        return len(doomed)


class FakeStatementsRepository:
    """In-memory statement metadata store."""

    def __init__(self) -> None:
        self.statements: dict[str, FinancialStatement] = {}
        self.fail_on: dict[str, Exception] = {}
        self._ids = count(1)

    def fetch_statements(self, month: str) -> list[FinancialStatement]:
        return [s for s in self.statements.values() if s.month == month]

    def insert_statement(
        self,
        month,
        filename,
        file_path,
        file_size,
        content_type,
        uploaded_by,
        notes,
    ) -> FinancialStatement:
        if "insert_statement" in self.fail_on:
            raise self.fail_on["insert_statement"]
        statement = FinancialStatement(
            id=f"statement-{next(self._ids)}",
            month=month,
            filename=filename,
            file_path=file_path,
            file_size=file_size,
            content_type=content_type,
            uploaded_by=uploaded_by,
            notes=notes,
            created_at=_CREATED_AT,
        )
        self.statements[statement.id] = statement
        return statement

    def delete_statement(self, statement_id: str) -> None:
        if self.statements.pop(statement_id, None) is None:
            raise NotFound("financial_statements", statement_id)


class FakeBlobStore:
    """Dictionary-backed blob store."""

    def __init__(self) -> None:
        self.blobs: dict[str, bytes] = {}
        self.fail_on: dict[str, Exception] = {}

    def put(self, key: str, content: bytes, content_type: str) -> None:
        if "put" in self.fail_on:
            raise self.fail_on["put"]
        self.blobs[key] = content

    def get(self, key: str) -> bytes:
        if key not in self.blobs:
            raise NotFound("blob", key)
        return self.blobs[key]

    def remove(self, key: str) -> None:
        if "remove" in self.fail_on:
            raise self.fail_on["remove"]
        if self.blobs.pop(key, None) is None:
            raise NotFound("blob", key)


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def ledger_repository() -> FakeLedgerRepository:
    return FakeLedgerRepository()


@pytest.fixture
def balance_repository() -> FakeBalanceRepository:
    return FakeBalanceRepository()


@pytest.fixture
def sub_budget_repository() -> FakeSubBudgetRepository:
    return FakeSubBudgetRepository()


@pytest.fixture
def statements_repository() -> FakeStatementsRepository:
    return FakeStatementsRepository()


@pytest.fixture
def blob_store() -> FakeBlobStore:
    return FakeBlobStore()


@pytest.fixture
def make_account():
    """Factory for balance accounts with sensible defaults."""

    def _make(**overrides) -> BalanceAccount:
        values = {
            "id": "account-1",
            "name": "Car loan",
            "description": "",
            "initial_balance": Decimal("12000.00"),
            "monthly_deduction": Decimal("1000.00"),
            "start_month": "2025-01",
        }
        values.update(overrides)
        return BalanceAccount(**values)

    return _make


@pytest.fixture
def make_expense():
    """Factory for expense rows with sensible defaults."""
    ids = count(1)

    def _make(**overrides) -> Expense:
        values = {
            "id": f"expense-{next(ids)}",
            "member": "Nikkie",
            "category": "Groceries",
            "description": "Groceries",
            "amount": Decimal("100.00"),
            "month": "2025-01",
        }
        values.update(overrides)
        return Expense(**values)

    return _make


@pytest.fixture
def sqlite_db_port(tmp_path):
    """Database port over a file-backed SQLite store with the schema."""
    engine = create_engine(f"sqlite:///{tmp_path / 'budget.db'}")
    create_schema(engine, logger=MagicMock())
    yield SqlAlchemyDatabaseEngineAdapter(engine)
    engine.dispose()
