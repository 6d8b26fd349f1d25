"""Dashboard headline statistics."""

from typing import Sequence

from gestio.domain.entities import Budget, LogisticsProcess, Transaction

from .budgets import budget_execution_percentage
from .liquidity import total_liquidity
from .models import DashboardStats
from .processes import active_process_count, pending_process_count


def compute_dashboard_stats(
    transactions: Sequence[Transaction],
    budgets: Sequence[Budget],
    processes: Sequence[LogisticsProcess],
) -> DashboardStats:
    """
    Compute the four dashboard numbers from already-fetched lists.

    Empty lists are valid input and yield zeros.
    """
    return DashboardStats(
        total_liquidity=total_liquidity(transactions),
        budget_executed=budget_execution_percentage(budgets),
        active_processes=active_process_count(processes),
        pending_processes=pending_process_count(processes),
    )
