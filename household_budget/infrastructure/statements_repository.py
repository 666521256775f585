"""SQLAlchemy-backed repository for financial statement metadata."""

from collections.abc import Mapping

from sqlalchemy import text

from household_budget.application.ports.database import DatabaseEnginePort
from household_budget.application.ports.statements_repository import (
    StatementsRepositoryPort,
)
from household_budget.domain.errors import NotFound
from household_budget.domain.models import FinancialStatement
from household_budget.infrastructure.db import translate_store_errors
from household_budget.infrastructure.row_mapping import (
    as_datetime,
    new_id,
    now_param,
)

SELECT_STATEMENTS_SQL = text(
    """
    SELECT id, month, filename, file_path, file_size, content_type,
           uploaded_by, notes, created_at
    FROM financial_statements
    WHERE month = :month
    ORDER BY created_at DESC, id
    """
)

INSERT_STATEMENT_SQL = text(
    """
    INSERT INTO financial_statements (
        id,
        month,
        filename,
        file_path,
        file_size,
        content_type,
        uploaded_by,
        notes,
        created_at
    )
    VALUES (
        :id,
        :month,
        :filename,
        :file_path,
        :file_size,
        :content_type,
        :uploaded_by,
        :notes,
        :created_at
    )
    """
)

DELETE_STATEMENT_SQL = text("DELETE FROM financial_statements WHERE id = :id")


def _statement_from_row(row: Mapping) -> FinancialStatement:
    return FinancialStatement(
        id=row["id"],
        month=row["month"],
        filename=row["filename"],
        file_path=row["file_path"],
        file_size=int(row["file_size"]),
        content_type=row["content_type"],
        uploaded_by=row["uploaded_by"],
        notes=row["notes"] or "",
        created_at=as_datetime(row["created_at"]),
    )


class SqlAlchemyStatementsRepository(StatementsRepositoryPort):
    """Repository backed by SQLAlchemy for statement metadata."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the budget engine.
        """
        self._db_port = db_port

    def fetch_statements(self, month: str) -> list[FinancialStatement]:
        engine = self._db_port.get_budget_engine()
        with translate_store_errors(f"fetch statements of {month}"):
            with engine.connect() as conn:
                rows = conn.execute(
                    SELECT_STATEMENTS_SQL,
                    {"month": month},
                ).all()
        return [_statement_from_row(row._mapping) for row in rows]

    def insert_statement(
        self,
        month: str,
        filename: str,
        file_path: str,
        file_size: int,
        content_type: str,
        uploaded_by: str | None,
        notes: str,
    ) -> FinancialStatement:
        params = {
            "id": new_id(),
            "month": month,
            "filename": filename,
            "file_path": file_path,
            "file_size": file_size,
            "content_type": content_type,
            "uploaded_by": uploaded_by,
            "notes": notes,
            "created_at": now_param(),
        }
        engine = self._db_port.get_budget_engine()
        with translate_store_errors(f"insert statement {file_path}"):
            with engine.begin() as conn:
                conn.execute(INSERT_STATEMENT_SQL, params)
        return _statement_from_row(params)

    def delete_statement(self, statement_id: str) -> None:
        engine = self._db_port.get_budget_engine()
        with translate_store_errors(f"delete statement {statement_id}"):
            with engine.begin() as conn:
                result = conn.execute(
                    DELETE_STATEMENT_SQL,
                    {"id": statement_id},
                )
                if result.rowcount == 0:
                    raise NotFound("financial_statements", statement_id)


__all__ = ["SqlAlchemyStatementsRepository"]
