"""Settings helpers for infrastructure adapters."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import dotenv
from sqlalchemy.engine import make_url

from household_budget.domain.errors import StoreUnavailable
from household_budget.utils.utils import get_project_root


def _get_env_var(name: str) -> str:
    """Read a required environment variable after loading ``.env``.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        StoreUnavailable: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise StoreUnavailable(f"Missing environment variable: {name}")
    return value


@dataclass(frozen=True)
class BudgetSettings:
    """Connection settings of the budget store.

    Attributes:
        db_url: SQLAlchemy URL of the relational store.
        db_password: Optional credential injected into ``db_url``.
        blob_root: Directory holding uploaded statements.
    """

    db_url: str
    db_password: Optional[str] = None
    blob_root: Path = Path("data") / "statements"

    @classmethod
    def from_env(cls) -> "BudgetSettings":
        """Build settings from environment variables.

        Returns:
            BudgetSettings: Settings sourced from the environment.

        Raises:
            StoreUnavailable: If ``BUDGET_DB_URL`` is not configured.
        """
        db_url = _get_env_var("BUDGET_DB_URL").strip()
        db_password = os.getenv("BUDGET_DB_PASSWORD") or None
        raw_blob_dir = os.getenv("BUDGET_BLOB_DIR")
        if raw_blob_dir:
            blob_root = Path(raw_blob_dir).expanduser().resolve()
        else:
            blob_root = get_project_root() / "data" / "statements"
        return cls(db_url=db_url, db_password=db_password, blob_root=blob_root)

    def database_url(self) -> str:
        """Return the store URL with the configured password applied."""
        if not self.db_password:
            return self.db_url
        url = make_url(self.db_url).set(password=self.db_password)
        return url.render_as_string(hide_password=False)


__all__ = ["BudgetSettings"]
