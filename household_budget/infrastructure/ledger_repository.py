"""SQLAlchemy-backed repository for month-keyed ledger rows."""

from collections.abc import Callable, Mapping
from dataclasses import asdict, dataclass

from sqlalchemy import text

from household_budget.application.ports.database import DatabaseEnginePort
from household_budget.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from household_budget.domain.constants import (
    DISCRETIONARY,
    EXPENSES,
    INCOMES,
    TAXES,
)
from household_budget.domain.errors import FormatError, NotFound
from household_budget.domain.models import (
    DiscretionaryExpense,
    Expense,
    Income,
    LedgerInput,
    MonthLedger,
    Tax,
)
from household_budget.infrastructure.db import translate_store_errors
from household_budget.infrastructure.row_mapping import (
    as_bool,
    as_datetime,
    as_money,
    new_id,
    now_param,
    to_param,
)


def _income_from_row(row: Mapping) -> Income:
    return Income(
        id=row["id"],
        member=row["member"],
        income_type=row["income_type"],
        description=row["description"],
        amount=as_money(row["amount"]),
        month=row["month"],
        created_at=as_datetime(row["created_at"]),
    )


def _tax_from_row(row: Mapping) -> Tax:
    return Tax(
        id=row["id"],
        member=row["member"],
        description=row["description"],
        amount=as_money(row["amount"]),
        month=row["month"],
        created_at=as_datetime(row["created_at"]),
    )


def _expense_from_row(row: Mapping) -> Expense:
    return Expense(
        id=row["id"],
        member=row["member"],
        category=row["category"],
        description=row["description"],
        amount=as_money(row["amount"]),
        month=row["month"],
        is_shared=as_bool(row["is_shared"]),
        is_recurring=as_bool(row["is_recurring"]),
        is_paid=as_bool(row["is_paid"]),
        include_vat=as_bool(row["include_vat"]),
        note=row["note"],
        balance_account_id=row["balance_account_id"],
        created_at=as_datetime(row["created_at"]),
    )


def _discretionary_from_row(row: Mapping) -> DiscretionaryExpense:
    return DiscretionaryExpense(
        id=row["id"],
        member=row["member"],
        description=row["description"],
        amount=as_money(row["amount"]),
        month=row["month"],
        note=row["note"],
        created_at=as_datetime(row["created_at"]),
    )


@dataclass(frozen=True)
class LedgerTableSpec:
    """Column layout and row mapping of one ledger table."""

    name: str
    columns: tuple[str, ...]
    from_row: Callable[[Mapping], object]

    @property
    def column_list(self) -> str:
        return ", ".join(("id", *self.columns, "month", "created_at"))

    @property
    def select_month_sql(self) -> str:
        return (
            f"SELECT {self.column_list} FROM {self.name} "
            "WHERE month = :month ORDER BY created_at DESC, id"
        )

    @property
    def select_one_sql(self) -> str:
        return f"SELECT {self.column_list} FROM {self.name} WHERE id = :id"

    @property
    def insert_sql(self) -> str:
        placeholders = ", ".join(
            f":{column}"
            for column in ("id", *self.columns, "month", "created_at")
        )
        return (
            f"INSERT INTO {self.name} ({self.column_list}) "
            f"VALUES ({placeholders})"
        )

    @property
    def update_sql(self) -> str:
        assignments = ", ".join(
            f"{column} = :{column}" for column in self.columns
        )
        return f"UPDATE {self.name} SET {assignments} WHERE id = :id"

    @property
    def delete_sql(self) -> str:
        return f"DELETE FROM {self.name} WHERE id = :id"


_LEDGER_SPECS = {
    INCOMES: LedgerTableSpec(
        name=INCOMES,
        columns=("member", "income_type", "description", "amount"),
        from_row=_income_from_row,
    ),
    TAXES: LedgerTableSpec(
        name=TAXES,
        columns=("member", "description", "amount"),
        from_row=_tax_from_row,
    ),
    EXPENSES: LedgerTableSpec(
        name=EXPENSES,
        columns=(
            "member",
            "category",
            "description",
            "amount",
            "is_shared",
            "is_recurring",
            "is_paid",
            "include_vat",
            "note",
            "balance_account_id",
        ),
        from_row=_expense_from_row,
    ),
    DISCRETIONARY: LedgerTableSpec(
        name=DISCRETIONARY,
        columns=("member", "description", "amount", "note"),
        from_row=_discretionary_from_row,
    ),
}

SELECT_ACCOUNT_PAYMENTS_SQL = text(
    f"""
    SELECT {_LEDGER_SPECS[EXPENSES].column_list}
    FROM expenses
    WHERE balance_account_id IS NOT NULL
      AND is_paid = :is_paid
    ORDER BY month, created_at
    """
)

DETACH_BALANCE_ACCOUNT_SQL = text(
    """
    UPDATE expenses
    SET balance_account_id = NULL
    WHERE balance_account_id = :account_id
    """
)


def _table_spec(kind: str) -> LedgerTableSpec:
    spec = _LEDGER_SPECS.get(kind)
    if spec is None:
        raise FormatError(f"Unknown ledger kind: {kind!r}")
    return spec


def _editable_params(spec: LedgerTableSpec, data: LedgerInput) -> dict:
    values = asdict(data)
    return {column: to_param(values[column]) for column in spec.columns}


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for incomes, taxes, and expenses."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the budget engine.
        """
        self._db_port = db_port

    def fetch_month(self, month: str) -> MonthLedger:
        """Return the four ledger kinds of a month from one connection."""
        engine = self._db_port.get_budget_engine()
        rows = {}
        with translate_store_errors(f"fetch month {month}"):
            with engine.connect() as conn:
                for kind, spec in _LEDGER_SPECS.items():
                    result = conn.execute(
                        text(spec.select_month_sql),
                        {"month": month},
                    )
                    rows[kind] = [
                        spec.from_row(row._mapping) for row in result
                    ]
        return MonthLedger(
            month=month,
            incomes=rows[INCOMES],
            taxes=rows[TAXES],
            expenses=rows[EXPENSES],
            discretionary=rows[DISCRETIONARY],
        )

    def fetch_entries(self, kind: str, month: str) -> list:
        spec = _table_spec(kind)
        engine = self._db_port.get_budget_engine()
        with translate_store_errors(f"fetch {kind} of {month}"):
            with engine.connect() as conn:
                result = conn.execute(
                    text(spec.select_month_sql),
                    {"month": month},
                )
                return [spec.from_row(row._mapping) for row in result]

    def insert_entry(self, kind: str, month: str, data: LedgerInput):
        return self.insert_entries(kind, month, [data])[0]

    def insert_entries(
        self,
        kind: str,
        month: str,
        rows: list[LedgerInput],
    ) -> list:
        """Insert rows of one kind in a single transaction.

        Returns:
            list: Created entities, in input order.
        """
        spec = _table_spec(kind)
        if not rows:
            return []
        created_at = now_param()
        payload = [
            {
                "id": new_id(),
                **_editable_params(spec, data),
                "month": month,
                "created_at": created_at,
            }
            for data in rows
        ]
        engine = self._db_port.get_budget_engine()
        with translate_store_errors(f"insert {kind} into {month}"):
            with engine.begin() as conn:
                conn.execute(text(spec.insert_sql), payload)
        return [spec.from_row(params) for params in payload]

    def update_entry(self, kind: str, entry_id: str, data: LedgerInput):
        spec = _table_spec(kind)
        params = {**_editable_params(spec, data), "id": entry_id}
        engine = self._db_port.get_budget_engine()
        with translate_store_errors(f"update {kind} {entry_id}"):
            with engine.begin() as conn:
                result = conn.execute(text(spec.update_sql), params)
                if result.rowcount == 0:
                    raise NotFound(kind, entry_id)
                row = conn.execute(
                    text(spec.select_one_sql),
                    {"id": entry_id},
                ).one()
        return spec.from_row(row._mapping)

    def delete_entry(self, kind: str, entry_id: str) -> None:
        spec = _table_spec(kind)
        engine = self._db_port.get_budget_engine()
        with translate_store_errors(f"delete {kind} {entry_id}"):
            with engine.begin() as conn:
                result = conn.execute(text(spec.delete_sql), {"id": entry_id})
                if result.rowcount == 0:
                    raise NotFound(kind, entry_id)

    def fetch_account_payments(self) -> list[Expense]:
        engine = self._db_port.get_budget_engine()
        with translate_store_errors("fetch balance account payments"):
            with engine.connect() as conn:
                result = conn.execute(
                    SELECT_ACCOUNT_PAYMENTS_SQL,
                    {"is_paid": True},
                )
                return [_expense_from_row(row._mapping) for row in result]

    def detach_balance_account(self, account_id: str) -> int:
        engine = self._db_port.get_budget_engine()
        with translate_store_errors(f"detach balance account {account_id}"):
            with engine.begin() as conn:
                result = conn.execute(
                    DETACH_BALANCE_ACCOUNT_SQL,
                    {"account_id": account_id},
                )
                return result.rowcount


__all__ = ["LedgerTableSpec", "SqlAlchemyLedgerRepository"]
