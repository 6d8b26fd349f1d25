"""Application services (use cases)."""

from .report_service import ReportService

__all__ = [
    "ReportService",
]
