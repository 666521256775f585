"""Outcome type returned by store-facing use cases."""

from dataclasses import dataclass
from typing import Any

from household_budget.domain.errors import BudgetError


@dataclass(frozen=True)
class OperationResult:
    """Success or failure of a use case call.

    Attributes:
        value: Payload on success (entity, list, or view), None otherwise.
        error: Failure reported by validation or the store.
    """

    value: Any = None
    error: BudgetError | None = None

    @property
    def ok(self) -> bool:
        """Return True when the operation succeeded."""
        return self.error is None

    @classmethod
    def success(cls, value: Any = None) -> "OperationResult":
        """Build a successful outcome."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: BudgetError) -> "OperationResult":
        """Build a failed outcome."""
        return cls(error=error)


__all__ = ["OperationResult"]
