"""Data Transfer Objects for application layer."""

from .report import AnalyticsReport, ExportBundle, ExportSheet
from .result import NO_DATA_CHANGED, OperationResult

__all__ = [
    "AnalyticsReport",
    "ExportBundle",
    "ExportSheet",
    "NO_DATA_CHANGED",
    "OperationResult",
]
