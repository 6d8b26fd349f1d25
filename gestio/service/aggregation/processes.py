"""Logistics process counts."""

from typing import Dict, Iterable, List

from gestio.domain.entities import ACTIVE_STATUSES, LogisticsProcess, ProcessStatus

from .models import DistributionSlice


def process_status_counts(processes: Iterable[LogisticsProcess]) -> Dict[ProcessStatus, int]:
    """Count processes per status. Every status is present, possibly as 0."""
    counts = {status: 0 for status in ProcessStatus}
    for p in processes:
        counts[p.status] += 1
    return counts


def active_process_count(processes: Iterable[LogisticsProcess]) -> int:
    """Processes that are pending or in progress."""
    return sum(1 for p in processes if p.status in ACTIVE_STATUSES)


def pending_process_count(processes: Iterable[LogisticsProcess]) -> int:
    return sum(1 for p in processes if p.status == ProcessStatus.PENDING)


def status_distribution(processes: Iterable[LogisticsProcess]) -> List[DistributionSlice]:
    """Non-zero status counts, in the order each status first appears."""
    counts: Dict[str, int] = {}
    for p in processes:
        counts[p.status.value] = counts.get(p.status.value, 0) + 1
    return [DistributionSlice(name=name, value=value) for name, value in counts.items()]
