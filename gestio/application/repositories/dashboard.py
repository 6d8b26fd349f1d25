"""Dashboard statistics over all three entity tables."""

from typing import Optional

import structlog

from gestio.domain.exceptions import DomainException, StoreError
from gestio.domain.interfaces import EntityTable, RecordStoreClient
from gestio.service.aggregation import EMPTY_STATS, DashboardStats, compute_dashboard_stats

from .budget import budget_from_row
from .logistics import process_from_row
from .transaction import transaction_from_row

logger = structlog.get_logger(__name__)


class DashboardStatsRepository:
    """
    Fetches transactions, budgets and processes and keeps derived stats.

    The three reads run one after another. A failure keeps the previous
    stats and records the message in `error`.
    """

    def __init__(self, store: RecordStoreClient):
        self._store = store
        self.stats: DashboardStats = EMPTY_STATS
        self.loading = False
        self.error: Optional[str] = None

    async def refresh(self) -> DashboardStats:
        self.loading = True
        try:
            if await self._store.current_caller() is None:
                logger.debug("dashboard_refresh_skipped_no_caller")
                return self.stats

            transaction_rows = await self._store.list(EntityTable.TRANSACTIONS)
            budget_rows = await self._store.list(EntityTable.BUDGETS)
            process_rows = await self._store.list(EntityTable.LOGISTICS_PROCESSES)

            try:
                transactions = [transaction_from_row(r) for r in transaction_rows]
                budgets = [budget_from_row(r) for r in budget_rows]
                processes = [process_from_row(r) for r in process_rows]
            except (KeyError, TypeError, ValueError, ArithmeticError) as e:
                raise StoreError(f"Malformed row in dashboard data: {e}") from e

            self.stats = compute_dashboard_stats(transactions, budgets, processes)
            self.error = None
            logger.info("dashboard_refreshed", **self.stats.to_dict())
        except DomainException as e:
            self.error = e.message
            logger.error("dashboard_refresh_failed", error=e.message)
        finally:
            self.loading = False

        return self.stats
