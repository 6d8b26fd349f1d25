"""Entity repositories: list mirrors over the record store."""

from .base import EntityRepository, ReadOnlyRepository
from .budget import BudgetRepository, budget_from_row
from .currency import CurrencyRepository
from .dashboard import DashboardStatsRepository
from .logistics import LogisticsRepository, process_from_row
from .transaction import TransactionRepository, transaction_from_row

__all__ = [
    "EntityRepository",
    "ReadOnlyRepository",
    "BudgetRepository",
    "CurrencyRepository",
    "DashboardStatsRepository",
    "LogisticsRepository",
    "TransactionRepository",
    "budget_from_row",
    "process_from_row",
    "transaction_from_row",
]
