"""Database infrastructure for the household budget store.

This module creates and reuses the SQLAlchemy engine of the budget store
and maps driver failures onto the store error taxonomy.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.pool import QueuePool

from household_budget.application.ports.database import DatabaseEnginePort
from household_budget.domain.errors import StoreError, StoreUnavailable
from household_budget.infrastructure.settings import BudgetSettings


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_budget_engine: Optional[Engine] = None


def get_budget_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the budget store.

    Returns:
        Engine: Lazily initialized engine connected to the budget store.

    Raises:
        StoreUnavailable: If the store URL is not configured.
    """
    global _budget_engine
    if _budget_engine is None:
        settings = BudgetSettings.from_env()
        _budget_engine = _create_engine(settings.database_url())
    return _budget_engine


@contextmanager
def translate_store_errors(operation: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures as store errors.

    Args:
        operation: Short description used in the error message.

    Raises:
        StoreUnavailable: On connectivity or driver interface failures.
        StoreError: On any other database failure.
    """
    try:
        yield
    except (OperationalError, InterfaceError) as exc:
        raise StoreUnavailable(f"{operation}: {exc}") from exc
    except SQLAlchemyError as exc:
        raise StoreError(f"{operation}: {exc}") from exc


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so repositories depend only on the protocol.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        """Initialize the adapter.

        Args:
            engine: Optional pre-built engine; the process-wide engine is
                used when omitted.
        """
        self._engine = engine

    def get_budget_engine(self) -> Engine:
        """Get the engine for the budget store.

        Returns:
            Engine: SQLAlchemy engine connected to the budget store.
        """
        if self._engine is not None:
            return self._engine
        return get_budget_engine()


__all__ = [
    "get_budget_engine",
    "translate_store_errors",
    "SqlAlchemyDatabaseEngineAdapter",
]
