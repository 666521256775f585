"""SQLite-backed tests for the ledger repository."""

from decimal import Decimal

import pytest

from household_budget.application.use_cases.carry_over import (
    LOADED,
    CarryOverOrchestrator,
)
from household_budget.domain.constants import (
    DISCRETIONARY,
    EXPENSES,
    INCOMES,
    TAXES,
)
from household_budget.domain.errors import FormatError, NotFound
from household_budget.domain.models import (
    DiscretionaryInput,
    ExpenseInput,
    IncomeInput,
    TaxInput,
)
from household_budget.domain.services.carry_over import expense_to_input
from household_budget.infrastructure.ledger_repository import (
    SqlAlchemyLedgerRepository,
)


@pytest.fixture
def repository(sqlite_db_port) -> SqlAlchemyLedgerRepository:
    return SqlAlchemyLedgerRepository(sqlite_db_port)


def _seed_january(repository: SqlAlchemyLedgerRepository) -> None:
    repository.insert_entries(
        INCOMES,
        "2025-01",
        [
            IncomeInput("Nikkie", "Salary", "Monthly pay", Decimal("30000")),
            IncomeInput("Hein", "Salary", "Monthly pay", Decimal("28000")),
        ],
    )
    repository.insert_entry(
        TAXES,
        "2025-01",
        TaxInput("Nikkie", "PAYE", Decimal("6000")),
    )
    repository.insert_entries(
        EXPENSES,
        "2025-01",
        [
            ExpenseInput(
                "Nikkie",
                "Housing",
                "Rent",
                Decimal("9500.00"),
                is_shared=True,
                is_recurring=True,
            ),
            ExpenseInput(
                "Hein",
                "Transportation",
                "Car instalment",
                Decimal("4200.50"),
                is_paid=True,
                balance_account_id="account-1",
            ),
            ExpenseInput("Hein", "Groceries", "Food", Decimal("3000")),
        ],
    )
    repository.insert_entry(
        DISCRETIONARY,
        "2025-01",
        DiscretionaryInput("Hein", "Takeaways", Decimal("450.00")),
    )


def test_insert_and_fetch_month_round_trips_values(repository) -> None:
    _seed_january(repository)

    ledger = repository.fetch_month("2025-01")

    assert ledger.row_count == 7
    assert {income.member for income in ledger.incomes} == {"Nikkie", "Hein"}
    rent = next(e for e in ledger.expenses if e.description == "Rent")
    assert rent.amount == Decimal("9500.00")
    assert rent.is_shared is True
    assert rent.is_recurring is True
    assert rent.is_paid is False
    assert rent.balance_account_id is None
    assert rent.created_at is not None
    instalment = next(
        e for e in ledger.expenses if e.description == "Car instalment"
    )
    assert instalment.amount == Decimal("4200.50")
    assert ledger.discretionary[0].amount == Decimal("450.00")
    assert repository.fetch_month("2025-02").is_empty


def test_fetch_entries_rejects_unknown_kind(repository) -> None:
    with pytest.raises(FormatError):
        repository.fetch_entries("savings", "2025-01")


def test_update_entry_returns_stored_row(repository) -> None:
    created = repository.insert_entry(
        TAXES,
        "2025-01",
        TaxInput("Hein", "PAYE", Decimal("5000")),
    )

    updated = repository.update_entry(
        TAXES,
        created.id,
        TaxInput("Hein", "PAYE and UIF", Decimal("5177.12")),
    )

    assert updated.id == created.id
    assert updated.month == "2025-01"
    assert updated.description == "PAYE and UIF"
    assert updated.amount == Decimal("5177.12")


def test_update_and_delete_missing_rows_raise_not_found(repository) -> None:
    with pytest.raises(NotFound):
        repository.update_entry(
            TAXES,
            "missing",
            TaxInput("Hein", "PAYE", Decimal("1")),
        )
    with pytest.raises(NotFound):
        repository.delete_entry(INCOMES, "missing")


def test_delete_entry_removes_row(repository) -> None:
    created = repository.insert_entry(
        DISCRETIONARY,
        "2025-01",
        DiscretionaryInput("Nikkie", "Coffee", Decimal("45")),
    )

    repository.delete_entry(DISCRETIONARY, created.id)

    assert repository.fetch_entries(DISCRETIONARY, "2025-01") == []


def test_account_payments_and_detach(repository) -> None:
    _seed_january(repository)
    repository.insert_entry(
        EXPENSES,
        "2025-02",
        ExpenseInput(
            "Hein",
            "Transportation",
            "Car instalment",
            Decimal("4200.50"),
            balance_account_id="account-1",
        ),
    )

    payments = repository.fetch_account_payments()

    assert [p.month for p in payments] == ["2025-01"]
    assert payments[0].is_paid is True
    assert repository.detach_balance_account("account-1") == 2
    assert repository.fetch_account_payments() == []
    assert repository.detach_balance_account("account-1") == 0


def test_select_month_auto_carries_from_store(repository, logger) -> None:
    _seed_january(repository)
    orchestrator = CarryOverOrchestrator(repository, logger=logger)

    result = orchestrator.select_month("2025-02")

    assert result.ok
    assert result.state == LOADED
    assert result.auto_carried is True
    assert result.carried_count == 6
    assert len(result.ledger.incomes) == 2
    assert len(result.ledger.taxes) == 1
    assert len(result.ledger.expenses) == 3
    assert result.ledger.discretionary == []
    rent = next(e for e in result.ledger.expenses if e.description == "Rent")
    assert rent.month == "2025-02"
    assert rent.is_recurring is True
    source = {
        e.description: e
        for e in repository.fetch_entries(EXPENSES, "2025-01")
    }
    for copy in result.ledger.expenses:
        assert expense_to_input(copy) == expense_to_input(
            source[copy.description]
        )
    # January is untouched.
    assert repository.fetch_month("2025-01").row_count == 7
