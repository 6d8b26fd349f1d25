"""Dashboard and report Pydantic schemas."""

from decimal import Decimal
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class DashboardStatsSchema(BaseModel):
    """Schema for GET /v1/dashboard/stats."""

    model_config = ConfigDict(from_attributes=True)

    total_liquidity: Decimal = Field(..., examples=["60.00"])
    budget_executed: float = Field(..., examples=[85.0])
    active_processes: int = Field(..., ge=0, examples=[3])
    pending_processes: int = Field(..., ge=0, examples=[2])


class SeriesPointSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str = Field(..., examples=["Mar 5"])
    income: Decimal
    expense: Decimal


class DistributionSliceSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    value: int | Decimal


class AnalyticsResponseSchema(BaseModel):
    """Schema for GET /v1/reports/analytics."""

    model_config = ConfigDict(from_attributes=True)

    financial_series: List[SeriesPointSchema]
    budget_distribution: List[DistributionSliceSchema]
    logistics_distribution: List[DistributionSliceSchema]


class ExportSheetSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    rows: List[Dict[str, Any]]


class ExportResponseSchema(BaseModel):
    """Schema for GET /v1/reports/export."""

    model_config = ConfigDict(from_attributes=True)

    title: str = Field(..., examples=["Gestio System Report"])
    filename: str = Field(..., examples=["Gestio_Report_2024-03-05"])
    sheets: List[ExportSheetSchema]
