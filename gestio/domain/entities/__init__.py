"""Domain Entities - Core business objects."""

from .budget import Budget
from .currency import Currency
from .identity import Identity, Session
from .logistics import (
    ACTIVE_STATUSES,
    LogisticsProcess,
    ProcessStatus,
    details_from_pairs,
    validate_details,
)
from .transaction import Transaction, TransactionType

__all__ = [
    "ACTIVE_STATUSES",
    "Budget",
    "Currency",
    "Identity",
    "LogisticsProcess",
    "ProcessStatus",
    "Session",
    "Transaction",
    "TransactionType",
    "details_from_pairs",
    "validate_details",
]
