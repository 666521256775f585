"""Composition root for wiring infrastructure adapters."""

from household_budget.application.ports.balance_repository import (
    BalanceRepositoryPort,
)
from household_budget.application.ports.blob_store import BlobStorePort
from household_budget.application.ports.database import DatabaseEnginePort
from household_budget.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from household_budget.application.ports.statements_repository import (
    StatementsRepositoryPort,
)
from household_budget.application.ports.sub_budget_repository import (
    SubBudgetRepositoryPort,
)
from household_budget.infrastructure.balance_repository import (
    SqlAlchemyBalanceRepository,
)
from household_budget.infrastructure.blob_store import LocalBlobStore
from household_budget.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from household_budget.infrastructure.ledger_repository import (
    SqlAlchemyLedgerRepository,
)
from household_budget.infrastructure.logging.logger import get_app_logger
from household_budget.infrastructure.settings import BudgetSettings
from household_budget.infrastructure.statements_repository import (
    SqlAlchemyStatementsRepository,
)
from household_budget.infrastructure.sub_budget_repository import (
    SqlAlchemySubBudgetRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the ledger repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


def build_balance_repository(
    db_port: DatabaseEnginePort | None = None,
) -> BalanceRepositoryPort:
    """Return the balance account repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyBalanceRepository(resolved_db)


def build_sub_budget_repository(
    db_port: DatabaseEnginePort | None = None,
) -> SubBudgetRepositoryPort:
    """Return the sub-budget repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemySubBudgetRepository(resolved_db)


def build_statements_repository(
    db_port: DatabaseEnginePort | None = None,
) -> StatementsRepositoryPort:
    """Return the financial statements repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyStatementsRepository(resolved_db)


def build_blob_store(settings: BudgetSettings | None = None) -> BlobStorePort:
    """Return the blob store rooted at the configured directory."""
    resolved = settings or BudgetSettings.from_env()
    return LocalBlobStore(resolved.blob_root, logger=get_app_logger())


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_balance_repository",
    "build_sub_budget_repository",
    "build_statements_repository",
    "build_blob_store",
]
