"""Data transfer objects for analytics and export reports."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from gestio.service.aggregation import DistributionSlice, SeriesPoint


@dataclass(frozen=True)
class AnalyticsReport:
    """Chart data for the reports view."""

    financial_series: List[SeriesPoint]
    budget_distribution: List[DistributionSlice]
    logistics_distribution: List[DistributionSlice]


@dataclass(frozen=True)
class ExportSheet:
    """One named table of an export, as a list of row dictionaries."""

    name: str
    rows: List[Dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class ExportBundle:
    """
    Raw input for PDF/spreadsheet writers.

    Values stay unformatted (amounts as Decimal) except dates, which are
    rendered with the user's date format.
    """

    title: str
    filename: str
    sheets: List[ExportSheet]

    def sheet(self, name: str) -> ExportSheet:
        for s in self.sheets:
            if s.name == name:
                return s
        raise KeyError(name)
