"""Port for month-keyed ledger rows (incomes, taxes, expenses, discretionary).

Implementations raise StoreError subclasses from
``household_budget.domain.errors``; use cases turn them into outcomes.
"""

from typing import Protocol

from household_budget.domain.models import Expense, LedgerInput, MonthLedger


class LedgerRepositoryPort(Protocol):
    """Port exposing read and write access to ledger rows."""

    def fetch_month(self, month: str) -> MonthLedger:
        """Return every ledger row of a month, newest first per kind."""

    def fetch_entries(self, kind: str, month: str) -> list:
        """Return the rows of one ledger kind for a month."""

    def insert_entry(self, kind: str, month: str, data: LedgerInput):
        """Insert one row with a fresh identity and timestamp."""

    def insert_entries(
        self,
        kind: str,
        month: str,
        rows: list[LedgerInput],
    ) -> list:
        """Insert several rows of one kind as a single batch."""

    def update_entry(self, kind: str, entry_id: str, data: LedgerInput):
        """Replace every editable field of a row.

        Raises:
            NotFound: If no row has ``entry_id``.
        """

    def delete_entry(self, kind: str, entry_id: str) -> None:
        """Delete a row.

        Raises:
            NotFound: If no row has ``entry_id``.
        """

    def fetch_account_payments(self) -> list[Expense]:
        """Return paid expenses linked to any balance account."""

    def detach_balance_account(self, account_id: str) -> int:
        """Clear ``balance_account_id`` on expenses referencing an account.

        Returns:
            int: Number of expenses detached.
        """


__all__ = ["LedgerRepositoryPort"]
