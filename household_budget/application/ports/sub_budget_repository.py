"""Port for sub-budgets and the expenses tracked against them."""

from typing import Protocol

from household_budget.domain.models import (
    BudgetEntry,
    BudgetEntryInput,
    BudgetExpense,
    BudgetExpenseInput,
)


class SubBudgetRepositoryPort(Protocol):
    """Port exposing access to sub-budget rows."""

    def fetch_budgets(self, month: str) -> list[BudgetEntry]:
        """Return the sub-budgets of a month, newest first."""

    def insert_budget(self, month: str, data: BudgetEntryInput) -> BudgetEntry:
        """Create a sub-budget in a month."""

    def update_budget(
        self,
        budget_id: str,
        data: BudgetEntryInput,
    ) -> BudgetEntry:
        """Replace the editable fields of a sub-budget."""

    def delete_budget(self, budget_id: str) -> None:
        """Delete the sub-budget row only."""

    def fetch_expenses(self, budget_ids: list[str]) -> list[BudgetExpense]:
        """Return expenses of the given budgets, newest date first."""

    def insert_expense(
        self,
        budget_id: str,
        data: BudgetExpenseInput,
    ) -> BudgetExpense:
        """Record an expense against a sub-budget."""

    def update_expense(
        self,
        expense_id: str,
        data: BudgetExpenseInput,
    ) -> BudgetExpense:
        """Replace the editable fields of a sub-budget expense."""

    def delete_expense(self, expense_id: str) -> None:
        """Delete one sub-budget expense."""

    def delete_budget_expenses(self, budget_id: str) -> int:
        """Delete every expense of a sub-budget, returning the count."""


__all__ = ["SubBudgetRepositoryPort"]
