"""Simple CLI to validate the budget store connection.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer and runs a basic health
check against the configured store.
"""

from household_budget.infrastructure.container import build_database_adapter
from household_budget.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a basic connectivity check against the budget store."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    engine = adapter.get_budget_engine()
    logger.info(f"Budget DB: {engine.url}")

    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")

    logger.info("Budget store connection is working.")


if __name__ == "__main__":  # pragma: no cover
    main()
