"""Database infrastructure."""

from .connection import DatabaseSessionManager, db_manager
from .models import (
    Base,
    BudgetModel,
    CurrencyModel,
    LogisticsProcessModel,
    TransactionModel,
)
from .record_store import SqlRecordStoreClient

__all__ = [
    "DatabaseSessionManager",
    "db_manager",
    "Base",
    "BudgetModel",
    "CurrencyModel",
    "LogisticsProcessModel",
    "TransactionModel",
    "SqlRecordStoreClient",
]
