"""Dependency injection for FastAPI."""

from typing import Annotated, Optional

from fastapi import Depends, Header

from gestio.application.repositories import (
    BudgetRepository,
    CurrencyRepository,
    DashboardStatsRepository,
    LogisticsRepository,
    TransactionRepository,
)
from gestio.application.services import ReportService
from gestio.core.config import settings
from gestio.core.preferences import PreferencesStore
from gestio.domain.entities import Identity
from gestio.domain.exceptions import NotAuthenticatedException
from gestio.domain.interfaces import AuthProvider, RecordStoreClient
from gestio.infrastructure.clients import HttpAuthProvider, HttpRecordStoreClient
from gestio.infrastructure.database import SqlRecordStoreClient, db_manager


# External client dependencies
def get_auth_provider() -> AuthProvider:
    """Get an AuthProvider instance scoped to one request."""
    return HttpAuthProvider()


async def get_current_identity(
    auth: Annotated[AuthProvider, Depends(get_auth_provider)],
    authorization: Annotated[Optional[str], Header()] = None,
) -> Identity:
    """Resolve the bearer token on the request to the calling user."""
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise NotAuthenticatedException()
    return await auth.fetch_user(token.strip())


async def get_record_store(
    auth: Annotated[AuthProvider, Depends(get_auth_provider)],
    identity: Annotated[Identity, Depends(get_current_identity)],
) -> RecordStoreClient:
    """Get the record store configured by `store_backend`, acting as the caller."""
    if settings.store_backend == "sql":
        return SqlRecordStoreClient(db_manager.session_factory, caller=identity)
    return HttpRecordStoreClient(auth)


# Repository dependencies
async def get_budget_repository(
    store: Annotated[RecordStoreClient, Depends(get_record_store)],
) -> BudgetRepository:
    return BudgetRepository(store)


async def get_transaction_repository(
    store: Annotated[RecordStoreClient, Depends(get_record_store)],
) -> TransactionRepository:
    return TransactionRepository(store)


async def get_logistics_repository(
    store: Annotated[RecordStoreClient, Depends(get_record_store)],
) -> LogisticsRepository:
    return LogisticsRepository(store)


async def get_currency_repository(
    store: Annotated[RecordStoreClient, Depends(get_record_store)],
) -> CurrencyRepository:
    return CurrencyRepository(store)


async def get_dashboard_repository(
    store: Annotated[RecordStoreClient, Depends(get_record_store)],
) -> DashboardStatsRepository:
    return DashboardStatsRepository(store)


# Service dependencies
async def get_report_service(
    store: Annotated[RecordStoreClient, Depends(get_record_store)],
) -> ReportService:
    """Get a ReportService instance."""
    return ReportService(store)


def get_preferences_store() -> PreferencesStore:
    """Get the preferences file store."""
    return PreferencesStore(settings.preferences_path)
