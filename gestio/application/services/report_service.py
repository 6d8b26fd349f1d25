"""Report service - builds analytics charts and export bundles."""

from datetime import date
from typing import Optional

import structlog

from gestio.application.dto import AnalyticsReport, ExportBundle, ExportSheet
from gestio.application.repositories import (
    BudgetRepository,
    LogisticsRepository,
    ReadOnlyRepository,
    TransactionRepository,
)
from gestio.core.preferences import UserPreferences
from gestio.domain.exceptions import StoreError
from gestio.domain.interfaces import RecordStoreClient
from gestio.service.aggregation import (
    AggregationSettings,
    aggregation_settings,
    budget_distribution,
    budget_percentage,
    daily_income_expense_series,
    status_distribution,
)
from gestio.service.formatting import format_date

logger = structlog.get_logger(__name__)

REPORT_TITLE = "Gestio System Report"


class ReportService:
    """
    Application service for the reports view.

    Each call fetches fresh lists through the entity repositories and
    hands them to the aggregation functions.
    """

    def __init__(
        self,
        store: RecordStoreClient,
        settings: AggregationSettings = aggregation_settings,
    ):
        self._store = store
        self._settings = settings

    async def analytics(self) -> AnalyticsReport:
        """
        Build the chart data for the reports view.

        Raises:
            StoreError: If any of the lists could not be fetched
        """
        transactions = TransactionRepository(
            self._store, limit=self._settings.analytics_transaction_limit
        )
        budgets = BudgetRepository(self._store)
        processes = LogisticsRepository(self._store)
        await self._load(transactions, budgets, processes)

        report = AnalyticsReport(
            financial_series=daily_income_expense_series(
                transactions.items, window=self._settings.series_window
            ),
            budget_distribution=budget_distribution(
                budgets.items, size=self._settings.distribution_size
            ),
            logistics_distribution=status_distribution(processes.items),
        )
        logger.info(
            "analytics_built",
            series_points=len(report.financial_series),
            budgets=len(report.budget_distribution),
        )
        return report

    async def export_bundle(
        self,
        preferences: UserPreferences,
        today: Optional[date] = None,
    ) -> ExportBundle:
        """
        Collect the transactions, budgets and logistics sheets for export.

        Args:
            preferences: Controls how dates are rendered
            today: Date used in the file name, defaults to date.today()

        Raises:
            StoreError: If any of the lists could not be fetched
        """
        transactions = TransactionRepository(
            self._store, limit=self._settings.export_transaction_limit
        )
        budgets = BudgetRepository(self._store)
        processes = LogisticsRepository(self._store)
        await self._load(transactions, budgets, processes)

        budget_names = {b.id: b.name for b in budgets.items}

        transaction_rows = [
            {
                "Date": format_date(t.created_at, preferences),
                "Description": t.description or "N/A",
                "Type": t.type.value,
                "Amount": t.amount,
                "Currency": t.currency_code,
                "Budget": budget_names.get(t.budget_id, "N/A") if t.budget_id else "N/A",
            }
            for t in transactions.items
        ]
        budget_rows = [
            {
                "Name": b.name,
                "Total Amount": b.total_amount,
                "Spent": b.spent_amount,
                "Currency": b.currency_code,
                "% Executed": budget_percentage(b),
            }
            for b in budgets.items
        ]
        process_rows = [
            {
                "Process Name": p.name,
                "Status": p.status.value,
                "Date": format_date(p.created_at, preferences),
            }
            for p in processes.items
        ]

        stamp = (today or date.today()).isoformat()
        logger.info(
            "export_built",
            transactions=len(transaction_rows),
            budgets=len(budget_rows),
            processes=len(process_rows),
        )
        return ExportBundle(
            title=REPORT_TITLE,
            filename=f"Gestio_Report_{stamp}",
            sheets=[
                ExportSheet(name="transactions", rows=transaction_rows),
                ExportSheet(name="budgets", rows=budget_rows),
                ExportSheet(name="logistics", rows=process_rows),
            ],
        )

    async def _load(self, *repositories: ReadOnlyRepository) -> None:
        for repo in repositories:
            await repo.list()
            if repo.error is not None:
                raise StoreError(repo.error)
