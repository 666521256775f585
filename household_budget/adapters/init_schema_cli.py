"""CLI adapter to create the budget tables in the configured store."""

from household_budget.infrastructure.container import build_database_adapter
from household_budget.infrastructure.logging.logger import get_app_logger
from household_budget.infrastructure.schema import create_schema


def main() -> None:
    """Create every missing table of the budget store."""
    logger = get_app_logger()
    adapter = build_database_adapter()
    tables = create_schema(adapter.get_budget_engine(), logger=logger)
    print(f"Budget schema ready: {', '.join(tables)}")


if __name__ == "__main__":  # pragma: no cover
    main()
