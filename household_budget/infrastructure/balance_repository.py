"""SQLAlchemy-backed repository for balance accounts and their history."""

from collections.abc import Mapping

from sqlalchemy import text

from household_budget.application.ports.balance_repository import (
    BalanceRepositoryPort,
)
from household_budget.application.ports.database import DatabaseEnginePort
from household_budget.domain.errors import NotFound
from household_budget.domain.models import (
    BalanceAccount,
    BalanceAccountInput,
    BalanceHistoryEntry,
)
from household_budget.infrastructure.db import translate_store_errors
from household_budget.infrastructure.row_mapping import (
    as_datetime,
    as_money,
    money_param,
    new_id,
    now_param,
)

SELECT_ACCOUNTS_SQL = text(
    """
    SELECT id, name, description, initial_balance, monthly_deduction,
           start_month, created_at
    FROM balance_accounts
    ORDER BY name, id
    """
)

SELECT_ACCOUNT_SQL = text(
    """
    SELECT id, name, description, initial_balance, monthly_deduction,
           start_month, created_at
    FROM balance_accounts
    WHERE id = :id
    """
)

INSERT_ACCOUNT_SQL = text(
    """
    INSERT INTO balance_accounts (
        id,
        name,
        description,
        initial_balance,
        monthly_deduction,
        start_month,
        created_at
    )
    VALUES (
        :id,
        :name,
        :description,
        :initial_balance,
        :monthly_deduction,
        :start_month,
        :created_at
    )
    """
)

UPDATE_ACCOUNT_SQL = text(
    """
    UPDATE balance_accounts
    SET name = :name,
        description = :description,
        initial_balance = :initial_balance,
        monthly_deduction = :monthly_deduction,
        start_month = :start_month
    WHERE id = :id
    """
)

DELETE_ACCOUNT_SQL = text("DELETE FROM balance_accounts WHERE id = :id")

SELECT_HISTORY_SQL = """
    SELECT id, account_id, month, opening_balance, deduction,
           closing_balance, created_at
    FROM balance_history
"""

INSERT_HISTORY_SQL = text(
    """
    INSERT INTO balance_history (
        id,
        account_id,
        month,
        opening_balance,
        deduction,
        closing_balance,
        created_at
    )
    VALUES (
        :id,
        :account_id,
        :month,
        :opening_balance,
        :deduction,
        :closing_balance,
        :created_at
    )
    """
)

DELETE_HISTORY_SQL = text(
    "DELETE FROM balance_history WHERE account_id = :account_id"
)


def _account_from_row(row: Mapping) -> BalanceAccount:
    return BalanceAccount(
        id=row["id"],
        name=row["name"],
        description=row["description"] or "",
        initial_balance=as_money(row["initial_balance"]),
        monthly_deduction=as_money(row["monthly_deduction"]),
        start_month=row["start_month"],
        created_at=as_datetime(row["created_at"]),
    )


def _history_from_row(row: Mapping) -> BalanceHistoryEntry:
    return BalanceHistoryEntry(
        id=row["id"],
        account_id=row["account_id"],
        month=row["month"],
        opening_balance=as_money(row["opening_balance"]),
        deduction=as_money(row["deduction"]),
        closing_balance=as_money(row["closing_balance"]),
        created_at=as_datetime(row["created_at"]),
    )


def _account_params(data: BalanceAccountInput) -> dict:
    return {
        "name": data.name,
        "description": data.description,
        "initial_balance": money_param(data.initial_balance),
        "monthly_deduction": money_param(data.monthly_deduction),
        "start_month": data.start_month,
    }


class SqlAlchemyBalanceRepository(BalanceRepositoryPort):
    """Repository backed by SQLAlchemy for balance accounts."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the budget engine.
        """
        self._db_port = db_port

    def fetch_accounts(self) -> list[BalanceAccount]:
        engine = self._db_port.get_budget_engine()
        with translate_store_errors("fetch balance accounts"):
            with engine.connect() as conn:
                rows = conn.execute(SELECT_ACCOUNTS_SQL).all()
        return [_account_from_row(row._mapping) for row in rows]

    def fetch_account(self, account_id: str) -> BalanceAccount:
        engine = self._db_port.get_budget_engine()
        with translate_store_errors(f"fetch balance account {account_id}"):
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_ACCOUNT_SQL,
                    {"id": account_id},
                ).first()
        if row is None:
            raise NotFound("balance_accounts", account_id)
        return _account_from_row(row._mapping)

    def insert_account(self, data: BalanceAccountInput) -> BalanceAccount:
        params = {
            "id": new_id(),
            **_account_params(data),
            "created_at": now_param(),
        }
        engine = self._db_port.get_budget_engine()
        with translate_store_errors("insert balance account"):
            with engine.begin() as conn:
                conn.execute(INSERT_ACCOUNT_SQL, params)
        return _account_from_row(params)

    def update_account(
        self,
        account_id: str,
        data: BalanceAccountInput,
    ) -> BalanceAccount:
        engine = self._db_port.get_budget_engine()
        with translate_store_errors(f"update balance account {account_id}"):
            with engine.begin() as conn:
                result = conn.execute(
                    UPDATE_ACCOUNT_SQL,
                    {**_account_params(data), "id": account_id},
                )
                if result.rowcount == 0:
                    raise NotFound("balance_accounts", account_id)
                row = conn.execute(SELECT_ACCOUNT_SQL, {"id": account_id}).one()
        return _account_from_row(row._mapping)

    def delete_account(self, account_id: str) -> None:
        engine = self._db_port.get_budget_engine()
        with translate_store_errors(f"delete balance account {account_id}"):
            with engine.begin() as conn:
                result = conn.execute(DELETE_ACCOUNT_SQL, {"id": account_id})
                if result.rowcount == 0:
                    raise NotFound("balance_accounts", account_id)

    def fetch_history(
        self,
        account_id: str | None = None,
    ) -> list[BalanceHistoryEntry]:
        query = SELECT_HISTORY_SQL
        params = {}
        if account_id is not None:
            query += " WHERE account_id = :account_id"
            params["account_id"] = account_id
        query += " ORDER BY month DESC, created_at DESC"
        engine = self._db_port.get_budget_engine()
        with translate_store_errors("fetch balance history"):
            with engine.connect() as conn:
                rows = conn.execute(text(query), params).all()
        return [_history_from_row(row._mapping) for row in rows]

    def insert_history(
        self,
        account_id: str,
        month: str,
        opening_balance,
        deduction,
        closing_balance,
    ) -> BalanceHistoryEntry:
        params = {
            "id": new_id(),
            "account_id": account_id,
            "month": month,
            "opening_balance": money_param(opening_balance),
            "deduction": money_param(deduction),
            "closing_balance": money_param(closing_balance),
            "created_at": now_param(),
        }
        engine = self._db_port.get_budget_engine()
        with translate_store_errors(f"record history of {account_id}"):
            with engine.begin() as conn:
                conn.execute(INSERT_HISTORY_SQL, params)
        return _history_from_row(params)

    def delete_history(self, account_id: str) -> int:
        engine = self._db_port.get_budget_engine()
        with translate_store_errors(f"delete history of {account_id}"):
            with engine.begin() as conn:
                result = conn.execute(
                    DELETE_HISTORY_SQL,
                    {"account_id": account_id},
                )
                return result.rowcount


__all__ = ["SqlAlchemyBalanceRepository"]
