"""
Time-bucketed income/expense series for charting.

Buckets are calendar days labelled by month and day only ("Mar 5"),
taken from each transaction's own `created_at`. The year is not part
of the key, so the same day in different years shares a bucket and
sorts as one. Nothing here reads the wall clock.
"""

import calendar
from datetime import datetime
from decimal import Decimal
from typing import Dict, Iterable, List, Tuple

from gestio.domain.entities import Transaction

from .models import SeriesPoint
from .settings import aggregation_settings


def day_bucket(instant: datetime) -> Tuple[int, int]:
    """Sort key of the bucket an instant falls into."""
    return instant.month, instant.day


def day_bucket_label(instant: datetime) -> str:
    """Short month/day label, e.g. "Mar 5"."""
    return f"{calendar.month_abbr[instant.month]} {instant.day}"


def daily_income_expense_series(
    transactions: Iterable[Transaction],
    window: int | None = None,
) -> List[SeriesPoint]:
    """
    Sum income and expense per day bucket and keep the latest buckets.

    Algorithm:
        1. Bucket each transaction by the month/day of its created_at
        2. Accumulate income and expense separately per bucket
        3. Sort buckets chronologically by (month, day)
        4. Keep the last `window` buckets

    Args:
        transactions: Transactions already fetched from the store
        window: Number of buckets to keep, defaults to settings.series_window

    Returns:
        Series points oldest first; empty for an empty input
    """
    window = window if window is not None else aggregation_settings.series_window

    buckets: Dict[Tuple[int, int], List] = {}
    for t in transactions:
        key = day_bucket(t.created_at)
        if key not in buckets:
            buckets[key] = [day_bucket_label(t.created_at), Decimal("0"), Decimal("0")]
        if t.is_income:
            buckets[key][1] += t.amount
        else:
            buckets[key][2] += t.amount

    ordered = [buckets[key] for key in sorted(buckets)]
    return [
        SeriesPoint(name=name, income=income, expense=expense)
        for name, income, expense in ordered[-window:]
    ]
