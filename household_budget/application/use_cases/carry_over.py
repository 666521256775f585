"""Use case orchestrating month loading and expense carry-over.

Selecting a month that has no income, tax, or expense rows copies the
previous month into it, at most once per orchestrator instance. Users can
also copy a hand-picked set of the previous month's expenses at any time.
"""

from dataclasses import dataclass, field

from household_budget.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from household_budget.domain.constants import CARRY_OVER_KINDS, EXPENSES
from household_budget.domain.errors import (
    BudgetError,
    PartialWriteFailure,
    StoreError,
)
from household_budget.domain.models import Expense, MonthLedger
from household_budget.domain.services.carry_over import (
    clone_month,
    default_selection,
    expense_to_input,
)
from household_budget.domain.services.month_keys import (
    previous_month,
    validate_month_key,
)
from household_budget.infrastructure.logging.logger import get_app_logger

IDLE = "idle"
LOADING = "loading"
EMPTY = "empty"
POPULATED = "populated"
CARRYING_OVER = "carrying_over"
LOADED = "loaded"
FAILED = "failed"


@dataclass(frozen=True)
class MonthLoadResult:
    """Outcome of selecting a month.

    Attributes:
        month: Selected MonthKey.
        state: Final orchestrator state (loaded or failed).
        ledger: Rows to display; an empty ledger on failure.
        auto_carried: Whether this call copied the previous month.
        carried_count: Number of rows copied by this call.
        error: Failure raised by validation or the store.
    """

    month: str
    state: str
    ledger: MonthLedger
    auto_carried: bool = False
    carried_count: int = 0
    error: BudgetError | None = None

    @property
    def ok(self) -> bool:
        """Return True when the month loaded without failure."""
        return self.error is None


@dataclass(frozen=True)
class CarryOverResult:
    """Outcome of a manual expense carry-over.

    Attributes:
        month: Target MonthKey.
        inserted: Expenses created in the target month.
        error: Failure that stopped the copy, if any.
    """

    month: str
    inserted: list[Expense] = field(default_factory=list)
    error: BudgetError | None = None

    @property
    def ok(self) -> bool:
        """Return True when every selected expense was copied."""
        return self.error is None


class CarryOverOrchestrator:
    """Load months and carry rows over from the previous month.

    One instance holds the per-session guard of months already auto-carried;
    build a fresh instance for every user session.
    """

    def __init__(self, ledger_repository: LedgerRepositoryPort, logger=None):
        """Initialize the orchestrator.

        Args:
            ledger_repository: Port giving access to ledger rows.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._carried_months: set[str] = set()
        self._state = IDLE

    @property
    def state(self) -> str:
        """Return the state reached by the latest month selection."""
        return self._state

    @property
    def carried_months(self) -> frozenset[str]:
        """Return the months auto-carried (or attempted) in this session."""
        return frozenset(self._carried_months)

    def select_month(self, month: str) -> MonthLoadResult:
        """Load a month, copying the previous month into it when empty.

        Args:
            month: MonthKey selected by the user.

        Returns:
            MonthLoadResult: Rows to display and what the call did.
        """
        try:
            validate_month_key(month)
        except BudgetError as exc:
            return self._fail(month, exc)

        self._state = LOADING
        try:
            ledger = self._ledger_repository.fetch_month(month)
        except StoreError as exc:
            self._logger.error(f"Failed to load {month}: {exc}")
            return self._fail(month, exc)

        if not ledger.is_empty:
            self._state = POPULATED
            return self._loaded(ledger)
        self._state = EMPTY
        if month in self._carried_months:
            return self._loaded(ledger)

        self._carried_months.add(month)
        self._state = CARRYING_OVER
        return self._carry_previous_month(month, ledger)

    def carry_over_expenses(
        self,
        month: str,
        expenses: list[Expense],
    ) -> CarryOverResult:
        """Copy selected expenses into ``month`` as new rows.

        Every field except identity, creation timestamp, and month is kept.
        Copying the same expenses twice creates duplicates.

        Args:
            month: Target MonthKey.
            expenses: Expenses picked by the user, usually from the
                previous month.

        Returns:
            CarryOverResult: Inserted rows, or the failure that stopped the
            copy after the rows already inserted.
        """
        try:
            validate_month_key(month)
        except BudgetError as exc:
            return CarryOverResult(month=month, error=exc)

        inserted: list[Expense] = []
        for expense in expenses:
            try:
                inserted.append(
                    self._ledger_repository.insert_entry(
                        EXPENSES,
                        month,
                        expense_to_input(expense),
                    )
                )
            except StoreError as exc:
                error = PartialWriteFailure(
                    "expense carry-over",
                    completed=len(inserted),
                    cause=exc,
                )
                self._logger.error(f"Carry-over into {month} failed: {error}")
                return CarryOverResult(
                    month=month,
                    inserted=inserted,
                    error=error,
                )

        self._logger.info(
            f"Carried over {len(inserted)} expenses into {month}"
        )
        return CarryOverResult(month=month, inserted=inserted)

    def previous_month_expenses(self, month: str) -> list[Expense]:
        """Return the expenses offered for carry-over into ``month``.

        Raises:
            FormatError: If the month key is invalid.
            StoreError: If the previous month cannot be read.
        """
        return self._ledger_repository.fetch_entries(
            EXPENSES,
            previous_month(month),
        )

    @staticmethod
    def default_selection(expenses: list[Expense]) -> set[str]:
        """Return the ids pre-selected for carry-over (recurring ones)."""
        return default_selection(expenses)

    def _carry_previous_month(
        self,
        month: str,
        empty_ledger: MonthLedger,
    ) -> MonthLoadResult:
        source_month = previous_month(month)
        try:
            source = self._ledger_repository.fetch_month(source_month)
        except StoreError as exc:
            self._carried_months.discard(month)
            self._logger.error(
                f"Failed to read {source_month} for carry-over: {exc}"
            )
            return self._fail(month, exc)

        if source.is_empty:
            self._logger.info(
                f"Nothing to carry into {month}: {source_month} is empty"
            )
            return self._loaded(empty_ledger)

        completed = 0
        for kind, rows in clone_month(source, CARRY_OVER_KINDS).items():
            if not rows:
                continue
            try:
                self._ledger_repository.insert_entries(kind, month, rows)
            except StoreError as exc:
                self._carried_months.discard(month)
                error = PartialWriteFailure(
                    "month carry-over",
                    completed=completed,
                    cause=exc,
                )
                self._logger.error(
                    f"Carry-over of {kind} into {month} failed: {error}"
                )
                return self._fail(month, error)
            completed += len(rows)

        self._logger.info(
            f"Carried {completed} rows from {source_month} into {month}"
        )
        try:
            ledger = self._ledger_repository.fetch_month(month)
        except StoreError as exc:
            self._logger.error(f"Failed to reload {month}: {exc}")
            return self._fail(month, exc, carried_count=completed)
        self._state = LOADED
        return MonthLoadResult(
            month=month,
            state=LOADED,
            ledger=ledger,
            auto_carried=True,
            carried_count=completed,
        )

    def _loaded(self, ledger: MonthLedger) -> MonthLoadResult:
        self._state = LOADED
        return MonthLoadResult(month=ledger.month, state=LOADED, ledger=ledger)

    def _fail(
        self,
        month: str,
        error: BudgetError,
        carried_count: int = 0,
    ) -> MonthLoadResult:
        self._state = FAILED
        return MonthLoadResult(
            month=month,
            state=FAILED,
            ledger=MonthLedger(month=month),
            auto_carried=carried_count > 0,
            carried_count=carried_count,
            error=error,
        )


__all__ = [
    "CarryOverOrchestrator",
    "MonthLoadResult",
    "CarryOverResult",
    "IDLE",
    "LOADING",
    "EMPTY",
    "POPULATED",
    "CARRYING_OVER",
    "LOADED",
    "FAILED",
]
