"""Pydantic schemas for API request/response validation."""

from .auth import SessionSchema, SignInSchema, SignUpSchema, UserSchema
from .budget import (
    BudgetAlertsResponseSchema,
    BudgetCreateSchema,
    BudgetListResponseSchema,
    BudgetResponseSchema,
    BudgetUpdateSchema,
)
from .currency import CurrencyListResponseSchema, CurrencyResponseSchema
from .error import ErrorResponseSchema
from .logistics import (
    LogisticsBoardResponseSchema,
    LogisticsCreateSchema,
    LogisticsListResponseSchema,
    LogisticsResponseSchema,
    LogisticsUpdateSchema,
)
from .preferences import PreferencesUpdateSchema
from .report import (
    AnalyticsResponseSchema,
    DashboardStatsSchema,
    ExportResponseSchema,
)
from .transaction import (
    TransactionCreateSchema,
    TransactionListResponseSchema,
    TransactionResponseSchema,
    TransactionUpdateSchema,
)

__all__ = [
    "SessionSchema",
    "SignInSchema",
    "SignUpSchema",
    "UserSchema",
    "BudgetAlertsResponseSchema",
    "BudgetCreateSchema",
    "BudgetListResponseSchema",
    "BudgetResponseSchema",
    "BudgetUpdateSchema",
    "CurrencyListResponseSchema",
    "CurrencyResponseSchema",
    "ErrorResponseSchema",
    "LogisticsBoardResponseSchema",
    "LogisticsCreateSchema",
    "LogisticsListResponseSchema",
    "LogisticsResponseSchema",
    "LogisticsUpdateSchema",
    "PreferencesUpdateSchema",
    "AnalyticsResponseSchema",
    "DashboardStatsSchema",
    "ExportResponseSchema",
    "TransactionCreateSchema",
    "TransactionListResponseSchema",
    "TransactionResponseSchema",
    "TransactionUpdateSchema",
]
