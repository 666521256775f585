"""Database ports for the household budget store.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations provide concrete adapters
that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the relational budget store."""

    def get_budget_engine(self) -> Engine:
        """Get the engine for the budget database.

        Returns:
            Engine: SQLAlchemy engine connected to the budget store.
        """


__all__ = ["DatabaseEnginePort"]
