"""Port for balance accounts and their history ledger."""

from typing import Protocol

from household_budget.domain.models import (
    BalanceAccount,
    BalanceAccountInput,
    BalanceHistoryEntry,
)


class BalanceRepositoryPort(Protocol):
    """Port exposing access to balance accounts."""

    def fetch_accounts(self) -> list[BalanceAccount]:
        """Return every balance account ordered by name."""

    def fetch_account(self, account_id: str) -> BalanceAccount:
        """Return one account.

        Raises:
            NotFound: If the account does not exist.
        """

    def insert_account(self, data: BalanceAccountInput) -> BalanceAccount:
        """Create an account."""

    def update_account(
        self,
        account_id: str,
        data: BalanceAccountInput,
    ) -> BalanceAccount:
        """Replace the editable fields of an account."""

    def delete_account(self, account_id: str) -> None:
        """Delete the account row only."""

    def fetch_history(
        self,
        account_id: str | None = None,
    ) -> list[BalanceHistoryEntry]:
        """Return history rows, newest month first."""

    def insert_history(
        self,
        account_id: str,
        month: str,
        opening_balance,
        deduction,
        closing_balance,
    ) -> BalanceHistoryEntry:
        """Record a monthly snapshot of an account."""

    def delete_history(self, account_id: str) -> int:
        """Delete every history row of an account, returning the count."""


__all__ = ["BalanceRepositoryPort"]
