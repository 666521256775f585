"""Application ports package."""

from .balance_repository import BalanceRepositoryPort
from .blob_store import BlobStorePort
from .database import DatabaseEnginePort
from .ledger_repository import LedgerRepositoryPort
from .statements_repository import StatementsRepositoryPort
from .sub_budget_repository import SubBudgetRepositoryPort

__all__ = [
    "BalanceRepositoryPort",
    "BlobStorePort",
    "DatabaseEnginePort",
    "LedgerRepositoryPort",
    "StatementsRepositoryPort",
    "SubBudgetRepositoryPort",
]
