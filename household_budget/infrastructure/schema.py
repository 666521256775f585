"""Table definitions of the budget store.

The DDL runs unchanged on PostgreSQL and SQLite. Amounts are NUMERIC and
month keys are ``YYYY-MM`` text.
"""

from sqlalchemy.engine import Engine

from household_budget.infrastructure.logging.logger import get_app_logger

CREATE_INCOMES_SQL = """
CREATE TABLE IF NOT EXISTS incomes (
    id TEXT PRIMARY KEY,
    member TEXT NOT NULL,
    income_type TEXT NOT NULL,
    description TEXT NOT NULL,
    amount NUMERIC(12, 2) NOT NULL,
    month TEXT NOT NULL,
    created_at TIMESTAMP NOT NULL
)
"""

CREATE_TAXES_SQL = """
CREATE TABLE IF NOT EXISTS taxes (
    id TEXT PRIMARY KEY,
    member TEXT NOT NULL,
    description TEXT NOT NULL,
    amount NUMERIC(12, 2) NOT NULL,
    month TEXT NOT NULL,
    created_at TIMESTAMP NOT NULL
)
"""

CREATE_BALANCE_ACCOUNTS_SQL = """
CREATE TABLE IF NOT EXISTS balance_accounts (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT NOT NULL DEFAULT '',
    initial_balance NUMERIC(12, 2) NOT NULL,
    monthly_deduction NUMERIC(12, 2) NOT NULL,
    start_month TEXT NOT NULL,
    created_at TIMESTAMP NOT NULL
)
"""

CREATE_EXPENSES_SQL = """
CREATE TABLE IF NOT EXISTS expenses (
    id TEXT PRIMARY KEY,
    member TEXT NOT NULL,
    category TEXT NOT NULL,
    description TEXT NOT NULL,
    amount NUMERIC(12, 2) NOT NULL,
    month TEXT NOT NULL,
    is_shared BOOLEAN NOT NULL DEFAULT FALSE,
    is_recurring BOOLEAN NOT NULL DEFAULT FALSE,
    is_paid BOOLEAN NOT NULL DEFAULT FALSE,
    include_vat BOOLEAN NOT NULL DEFAULT FALSE,
    note TEXT,
    balance_account_id TEXT
        REFERENCES balance_accounts (id) ON DELETE SET NULL,
    created_at TIMESTAMP NOT NULL
)
"""

CREATE_UNNECESSARY_EXPENSES_SQL = """
CREATE TABLE IF NOT EXISTS unnecessary_expenses (
    id TEXT PRIMARY KEY,
    member TEXT NOT NULL,
    description TEXT NOT NULL,
    amount NUMERIC(12, 2) NOT NULL,
    month TEXT NOT NULL,
    note TEXT,
    created_at TIMESTAMP NOT NULL
)
"""

CREATE_BALANCE_HISTORY_SQL = """
CREATE TABLE IF NOT EXISTS balance_history (
    id TEXT PRIMARY KEY,
    account_id TEXT NOT NULL
        REFERENCES balance_accounts (id) ON DELETE CASCADE,
    month TEXT NOT NULL,
    opening_balance NUMERIC(12, 2) NOT NULL,
    deduction NUMERIC(12, 2) NOT NULL,
    closing_balance NUMERIC(12, 2) NOT NULL,
    created_at TIMESTAMP NOT NULL
)
"""

CREATE_BUDGET_ENTRIES_SQL = """
CREATE TABLE IF NOT EXISTS budget_entries (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT NOT NULL DEFAULT '',
    budget_amount NUMERIC(12, 2) NOT NULL,
    month TEXT NOT NULL,
    member TEXT NOT NULL,
    category TEXT NOT NULL,
    created_at TIMESTAMP NOT NULL
)
"""

CREATE_BUDGET_EXPENSES_SQL = """
CREATE TABLE IF NOT EXISTS budget_expenses (
    id TEXT PRIMARY KEY,
    budget_id TEXT NOT NULL
        REFERENCES budget_entries (id) ON DELETE CASCADE,
    description TEXT NOT NULL,
    amount NUMERIC(12, 2) NOT NULL,
    date DATE NOT NULL,
    created_at TIMESTAMP NOT NULL
)
"""

CREATE_FINANCIAL_STATEMENTS_SQL = """
CREATE TABLE IF NOT EXISTS financial_statements (
    id TEXT PRIMARY KEY,
    month TEXT NOT NULL,
    filename TEXT NOT NULL,
    file_path TEXT NOT NULL UNIQUE,
    file_size INTEGER NOT NULL,
    content_type TEXT NOT NULL,
    uploaded_by TEXT,
    notes TEXT NOT NULL DEFAULT '',
    created_at TIMESTAMP NOT NULL
)
"""

# Referenced tables come before the tables pointing at them.
SCHEMA_STATEMENTS = (
    ("incomes", CREATE_INCOMES_SQL),
    ("taxes", CREATE_TAXES_SQL),
    ("balance_accounts", CREATE_BALANCE_ACCOUNTS_SQL),
    ("expenses", CREATE_EXPENSES_SQL),
    ("unnecessary_expenses", CREATE_UNNECESSARY_EXPENSES_SQL),
    ("balance_history", CREATE_BALANCE_HISTORY_SQL),
    ("budget_entries", CREATE_BUDGET_ENTRIES_SQL),
    ("budget_expenses", CREATE_BUDGET_EXPENSES_SQL),
    ("financial_statements", CREATE_FINANCIAL_STATEMENTS_SQL),
)

TABLE_NAMES = tuple(name for name, _ in SCHEMA_STATEMENTS)


def create_schema(engine: Engine, logger=None) -> list[str]:
    """Create every budget table that does not exist yet.

    Args:
        engine: Engine connected to the budget store.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        list[str]: Names of the tables ensured, in creation order.
    """
    logger = logger or get_app_logger()
    with engine.begin() as conn:
        for name, create_sql in SCHEMA_STATEMENTS:
            conn.exec_driver_sql(create_sql)
            logger.debug(f"Ensured table {name}")
    logger.info(f"Budget schema ready ({len(SCHEMA_STATEMENTS)} tables)")
    return list(TABLE_NAMES)


__all__ = ["SCHEMA_STATEMENTS", "TABLE_NAMES", "create_schema"]
