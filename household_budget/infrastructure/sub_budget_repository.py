"""SQLAlchemy-backed repository for sub-budgets and their expenses."""

from collections.abc import Mapping

from sqlalchemy import bindparam, text

from household_budget.application.ports.database import DatabaseEnginePort
from household_budget.application.ports.sub_budget_repository import (
    SubBudgetRepositoryPort,
)
from household_budget.domain.errors import NotFound
from household_budget.domain.models import (
    BudgetEntry,
    BudgetEntryInput,
    BudgetExpense,
    BudgetExpenseInput,
)
from household_budget.infrastructure.db import translate_store_errors
from household_budget.infrastructure.row_mapping import (
    as_date,
    as_datetime,
    as_money,
    money_param,
    new_id,
    now_param,
)

_BUDGET_COLUMNS = """
    id, name, description, budget_amount, month, member, category, created_at
"""

_EXPENSE_COLUMNS = "id, budget_id, description, amount, date, created_at"

SELECT_BUDGETS_SQL = text(
    f"""
    SELECT {_BUDGET_COLUMNS}
    FROM budget_entries
    WHERE month = :month
    ORDER BY created_at DESC, id
    """
)

SELECT_BUDGET_SQL = text(
    f"SELECT {_BUDGET_COLUMNS} FROM budget_entries WHERE id = :id"
)

INSERT_BUDGET_SQL = text(
    """
    INSERT INTO budget_entries (
        id,
        name,
        description,
        budget_amount,
        month,
        member,
        category,
        created_at
    )
    VALUES (
        :id,
        :name,
        :description,
        :budget_amount,
        :month,
        :member,
        :category,
        :created_at
    )
    """
)

UPDATE_BUDGET_SQL = text(
    """
    UPDATE budget_entries
    SET name = :name,
        description = :description,
        budget_amount = :budget_amount,
        member = :member,
        category = :category
    WHERE id = :id
    """
)

DELETE_BUDGET_SQL = text("DELETE FROM budget_entries WHERE id = :id")

SELECT_EXPENSES_SQL = text(
    f"""
    SELECT {_EXPENSE_COLUMNS}
    FROM budget_expenses
    WHERE budget_id IN :budget_ids
    ORDER BY date DESC, created_at DESC
    """
).bindparams(bindparam("budget_ids", expanding=True))

SELECT_EXPENSE_SQL = text(
    f"SELECT {_EXPENSE_COLUMNS} FROM budget_expenses WHERE id = :id"
)

INSERT_EXPENSE_SQL = text(
    """
    INSERT INTO budget_expenses (
        id,
        budget_id,
        description,
        amount,
        date,
        created_at
    )
    VALUES (
        :id,
        :budget_id,
        :description,
        :amount,
        :date,
        :created_at
    )
    """
)

UPDATE_EXPENSE_SQL = text(
    """
    UPDATE budget_expenses
    SET description = :description,
        amount = :amount,
        date = :date
    WHERE id = :id
    """
)

DELETE_EXPENSE_SQL = text("DELETE FROM budget_expenses WHERE id = :id")

DELETE_BUDGET_EXPENSES_SQL = text(
    "DELETE FROM budget_expenses WHERE budget_id = :budget_id"
)


def _budget_from_row(row: Mapping) -> BudgetEntry:
    return BudgetEntry(
        id=row["id"],
        name=row["name"],
        description=row["description"] or "",
        budget_amount=as_money(row["budget_amount"]),
        month=row["month"],
        member=row["member"],
        category=row["category"],
        created_at=as_datetime(row["created_at"]),
    )


def _expense_from_row(row: Mapping) -> BudgetExpense:
    return BudgetExpense(
        id=row["id"],
        budget_id=row["budget_id"],
        description=row["description"],
        amount=as_money(row["amount"]),
        date=as_date(row["date"]),
        created_at=as_datetime(row["created_at"]),
    )


def _budget_params(data: BudgetEntryInput) -> dict:
    return {
        "name": data.name,
        "description": data.description,
        "budget_amount": money_param(data.budget_amount),
        "member": data.member,
        "category": data.category,
    }


def _expense_params(data: BudgetExpenseInput) -> dict:
    return {
        "description": data.description,
        "amount": money_param(data.amount),
        "date": data.date.isoformat(),
    }


class SqlAlchemySubBudgetRepository(SubBudgetRepositoryPort):
    """Repository backed by SQLAlchemy for sub-budgets."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the budget engine.
        """
        self._db_port = db_port

    def fetch_budgets(self, month: str) -> list[BudgetEntry]:
        engine = self._db_port.get_budget_engine()
        with translate_store_errors(f"fetch sub-budgets of {month}"):
            with engine.connect() as conn:
                rows = conn.execute(SELECT_BUDGETS_SQL, {"month": month}).all()
        return [_budget_from_row(row._mapping) for row in rows]

    def insert_budget(self, month: str, data: BudgetEntryInput) -> BudgetEntry:
        params = {
            "id": new_id(),
            **_budget_params(data),
            "month": month,
            "created_at": now_param(),
        }
        engine = self._db_port.get_budget_engine()
        with translate_store_errors(f"insert sub-budget into {month}"):
            with engine.begin() as conn:
                conn.execute(INSERT_BUDGET_SQL, params)
        return _budget_from_row(params)

    def update_budget(
        self,
        budget_id: str,
        data: BudgetEntryInput,
    ) -> BudgetEntry:
        engine = self._db_port.get_budget_engine()
        with translate_store_errors(f"update sub-budget {budget_id}"):
            with engine.begin() as conn:
                result = conn.execute(
                    UPDATE_BUDGET_SQL,
                    {**_budget_params(data), "id": budget_id},
                )
                if result.rowcount == 0:
                    raise NotFound("budget_entries", budget_id)
                row = conn.execute(SELECT_BUDGET_SQL, {"id": budget_id}).one()
        return _budget_from_row(row._mapping)

    def delete_budget(self, budget_id: str) -> None:
        engine = self._db_port.get_budget_engine()
        with translate_store_errors(f"delete sub-budget {budget_id}"):
            with engine.begin() as conn:
                result = conn.execute(DELETE_BUDGET_SQL, {"id": budget_id})
                if result.rowcount == 0:
                    raise NotFound("budget_entries", budget_id)

    def fetch_expenses(self, budget_ids: list[str]) -> list[BudgetExpense]:
        if not budget_ids:
            return []
        engine = self._db_port.get_budget_engine()
        with translate_store_errors("fetch sub-budget expenses"):
            with engine.connect() as conn:
                rows = conn.execute(
                    SELECT_EXPENSES_SQL,
                    {"budget_ids": list(budget_ids)},
                ).all()
        return [_expense_from_row(row._mapping) for row in rows]

    def insert_expense(
        self,
        budget_id: str,
        data: BudgetExpenseInput,
    ) -> BudgetExpense:
        params = {
            "id": new_id(),
            "budget_id": budget_id,
            **_expense_params(data),
            "created_at": now_param(),
        }
        engine = self._db_port.get_budget_engine()
        with translate_store_errors(f"insert expense of {budget_id}"):
            with engine.begin() as conn:
                conn.execute(INSERT_EXPENSE_SQL, params)
        return _expense_from_row(params)

    def update_expense(
        self,
        expense_id: str,
        data: BudgetExpenseInput,
    ) -> BudgetExpense:
        engine = self._db_port.get_budget_engine()
        with translate_store_errors(f"update sub-budget expense {expense_id}"):
            with engine.begin() as conn:
                result = conn.execute(
                    UPDATE_EXPENSE_SQL,
                    {**_expense_params(data), "id": expense_id},
                )
                if result.rowcount == 0:
                    raise NotFound("budget_expenses", expense_id)
                row = conn.execute(
                    SELECT_EXPENSE_SQL,
                    {"id": expense_id},
                ).one()
        return _expense_from_row(row._mapping)

    def delete_expense(self, expense_id: str) -> None:
        engine = self._db_port.get_budget_engine()
        with translate_store_errors(f"delete sub-budget expense {expense_id}"):
            with engine.begin() as conn:
                result = conn.execute(DELETE_EXPENSE_SQL, {"id": expense_id})
                if result.rowcount == 0:
                    raise NotFound("budget_expenses", expense_id)

    def delete_budget_expenses(self, budget_id: str) -> int:
        engine = self._db_port.get_budget_engine()
        with translate_store_errors(f"delete expenses of {budget_id}"):
            with engine.begin() as conn:
                result = conn.execute(
                    DELETE_BUDGET_EXPENSES_SQL,
                    {"budget_id": budget_id},
                )
                return result.rowcount


__all__ = ["SqlAlchemySubBudgetRepository"]
