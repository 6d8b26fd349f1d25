"""
Data models produced by the aggregation functions.

These are plain value objects handed to the presentation layer and to
export writers.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class BudgetStatus(str, Enum):
    """Execution state of a budget, as used by the budget filters."""
    ACTIVE = "active"        # Under 100% and not exceeded
    COMPLETED = "completed"  # Exactly at or above 100% without exceeding
    EXCEEDED = "exceeded"    # Spent more than the total


class ProgressLevel(str, Enum):
    """Colour band of a budget progress bar."""
    OK = "ok"
    WARNING = "warning"
    DANGER = "danger"


@dataclass(frozen=True)
class DashboardStats:
    """
    Headline numbers for the dashboard.

    Attributes:
        total_liquidity: Income minus expenses across all currencies,
            without conversion. May be negative.
        budget_executed: Aggregate spent/total percentage. 0 when no
            budget has a total; may exceed 100.
        active_processes: Pending plus in-progress logistics processes.
        pending_processes: Pending logistics processes only.
    """
    total_liquidity: Decimal
    budget_executed: float
    active_processes: int
    pending_processes: int

    def to_dict(self) -> dict:
        return {
            "total_liquidity": str(self.total_liquidity),
            "budget_executed": round(self.budget_executed, 2),
            "active_processes": self.active_processes,
            "pending_processes": self.pending_processes,
        }


EMPTY_STATS = DashboardStats(
    total_liquidity=Decimal("0"),
    budget_executed=0.0,
    active_processes=0,
    pending_processes=0,
)


@dataclass(frozen=True)
class SeriesPoint:
    """Income and expense totals for one calendar-day bucket."""
    name: str
    income: Decimal
    expense: Decimal


@dataclass(frozen=True)
class DistributionSlice:
    """A named value in a pie/bar distribution."""
    name: str
    value: Decimal | int
