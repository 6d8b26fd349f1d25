"""
Aggregation Engine for the Gestio dashboard

Pure functions over entity lists already fetched from the record store.
No function here performs I/O or reads the wall clock.
"""

from .models import (
    BudgetStatus,
    DashboardStats,
    DistributionSlice,
    EMPTY_STATS,
    ProgressLevel,
    SeriesPoint,
)
from .settings import AggregationSettings, aggregation_settings
from .liquidity import total_liquidity, total_by_type
from .budgets import (
    budget_distribution,
    budget_execution_percentage,
    budget_percentage,
    budget_status,
    budgets_over_threshold,
    progress_bar_width,
    progress_level,
    remaining_amount,
)
from .processes import (
    active_process_count,
    pending_process_count,
    process_status_counts,
    status_distribution,
)
from .series import daily_income_expense_series, day_bucket_label
from .filters import (
    ALL,
    filter_budgets,
    filter_processes,
    filter_transactions,
    group_by_status,
    unique_currency_codes,
)
from .dashboard import compute_dashboard_stats

__all__ = [
    # Settings
    "AggregationSettings",
    "aggregation_settings",
    # Models
    "BudgetStatus",
    "DashboardStats",
    "DistributionSlice",
    "EMPTY_STATS",
    "ProgressLevel",
    "SeriesPoint",
    # Liquidity
    "total_liquidity",
    "total_by_type",
    # Budgets
    "budget_distribution",
    "budget_execution_percentage",
    "budget_percentage",
    "budget_status",
    "budgets_over_threshold",
    "progress_bar_width",
    "progress_level",
    "remaining_amount",
    # Processes
    "active_process_count",
    "pending_process_count",
    "process_status_counts",
    "status_distribution",
    # Series
    "daily_income_expense_series",
    "day_bucket_label",
    # Filters
    "ALL",
    "filter_budgets",
    "filter_processes",
    "filter_transactions",
    "group_by_status",
    "unique_currency_codes",
    # Dashboard
    "compute_dashboard_stats",
]
