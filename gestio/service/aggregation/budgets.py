"""
Budget execution calculations.

`spent_amount` on a budget is the source of truth for what has been
spent. It is never recomputed from transactions here, and it may exceed
`total_amount`: an over-budget state is valid and must stay visible.
"""

from decimal import Decimal
from typing import Iterable, List, Sequence

from gestio.core.preferences import UserPreferences
from gestio.domain.entities import Budget

from .models import BudgetStatus, DistributionSlice, ProgressLevel
from .settings import AggregationSettings, aggregation_settings


def budget_execution_percentage(budgets: Iterable[Budget]) -> float:
    """
    Aggregate execution across budgets: 100 * sum(spent) / sum(total).

    Budgets in different currencies are summed without conversion.

    Returns:
        0.0 when the summed total is 0 (including an empty list),
        otherwise the percentage, unbounded above.
    """
    total_budget = Decimal("0")
    total_spent = Decimal("0")
    for b in budgets:
        total_budget += b.total_amount
        total_spent += b.spent_amount

    if total_budget == 0:
        return 0.0
    return float(total_spent / total_budget * 100)


def budget_percentage(budget: Budget) -> float:
    """
    Execution percentage of a single budget.

    Not clamped: 120.0 means 20% over budget. 0.0 when the total is
    not positive.
    """
    if budget.total_amount <= 0:
        return 0.0
    return float(budget.spent_amount / budget.total_amount * 100)


def progress_bar_width(percentage: float) -> float:
    """Clamp a percentage to [0, 100] for a width-based progress bar."""
    return max(0.0, min(percentage, 100.0))


def remaining_amount(budget: Budget) -> Decimal:
    """Amount left to spend; negative when the budget is exceeded."""
    return budget.total_amount - budget.spent_amount


def budget_status(budget: Budget) -> BudgetStatus:
    if budget.is_exceeded:
        return BudgetStatus.EXCEEDED
    if budget_percentage(budget) >= 100:
        return BudgetStatus.COMPLETED
    return BudgetStatus.ACTIVE


def progress_level(
    percentage: float,
    settings: AggregationSettings = aggregation_settings,
) -> ProgressLevel:
    """Map an execution percentage to a progress colour band."""
    if percentage >= settings.progress_danger_threshold:
        return ProgressLevel.DANGER
    if percentage >= settings.progress_warning_threshold:
        return ProgressLevel.WARNING
    return ProgressLevel.OK


def budgets_over_threshold(
    budgets: Iterable[Budget],
    preferences: UserPreferences,
) -> List[Budget]:
    """
    Budgets whose execution reached the user's alert threshold.

    Returns an empty list when the user disabled budget alerts.
    """
    if not preferences.budget_alerts:
        return []
    return [
        b for b in budgets
        if budget_percentage(b) >= preferences.budget_threshold
    ]


def budget_distribution(
    budgets: Sequence[Budget],
    size: int | None = None,
) -> List[DistributionSlice]:
    """
    First `size` budgets as (name, total_amount) slices.

    Keeps the order the list arrived in (newest first from the store);
    budgets are deliberately not ranked by amount.
    """
    size = size if size is not None else aggregation_settings.distribution_size
    return [
        DistributionSlice(name=b.name, value=b.total_amount)
        for b in budgets[:size]
    ]
