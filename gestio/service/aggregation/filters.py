"""Client-side list filters used by the finance, budget and logistics views."""

from typing import Dict, Iterable, List, Optional, Sequence

from gestio.domain.entities import (
    Budget,
    LogisticsProcess,
    ProcessStatus,
    Transaction,
    TransactionType,
)

from .budgets import budget_status
from .models import BudgetStatus

ALL = "all"


def filter_transactions(
    transactions: Iterable[Transaction],
    search: Optional[str] = None,
    type_: TransactionType | str = ALL,
    currency: str = ALL,
) -> List[Transaction]:
    """
    Filter transactions by description, type and currency.

    The search term is a case-insensitive substring match on the
    description; rows without a description never match a search.
    """
    term = search.lower() if search else None
    result = []
    for t in transactions:
        if term and (t.description is None or term not in t.description.lower()):
            continue
        if type_ != ALL and t.type != TransactionType(type_):
            continue
        if currency != ALL and t.currency_code != currency:
            continue
        result.append(t)
    return result


def filter_budgets(
    budgets: Iterable[Budget],
    status: BudgetStatus | str = ALL,
    currency: str = ALL,
) -> List[Budget]:
    """Filter budgets by execution status and currency."""
    wanted = None if status == ALL else BudgetStatus(status)
    return [
        b for b in budgets
        if (wanted is None or budget_status(b) == wanted)
        and (currency == ALL or b.currency_code == currency)
    ]


def filter_processes(
    processes: Iterable[LogisticsProcess],
    search: Optional[str] = None,
) -> List[LogisticsProcess]:
    """Case-insensitive name search over logistics processes."""
    if not search:
        return list(processes)
    term = search.lower()
    return [p for p in processes if term in p.name.lower()]


def group_by_status(
    processes: Iterable[LogisticsProcess],
) -> Dict[ProcessStatus, List[LogisticsProcess]]:
    """Split processes into kanban columns, keeping list order within each."""
    columns: Dict[ProcessStatus, List[LogisticsProcess]] = {s: [] for s in ProcessStatus}
    for p in processes:
        columns[p.status].append(p)
    return columns


def unique_currency_codes(items: Sequence[Transaction | Budget]) -> List[str]:
    """Currency codes present in a list, in first-seen order."""
    return list(dict.fromkeys(item.currency_code for item in items))
