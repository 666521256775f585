"""Port for financial statement metadata rows."""

from typing import Protocol

from household_budget.domain.models import FinancialStatement


class StatementsRepositoryPort(Protocol):
    """Port exposing access to financial statement rows."""

    def fetch_statements(self, month: str) -> list[FinancialStatement]:
        """Return statements of a month, newest first."""

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
        """Record the metadata of an uploaded blob."""

    def delete_statement(self, statement_id: str) -> None:
        """Delete a statement row."""


__all__ = ["StatementsRepositoryPort"]
