"""Budget-related Pydantic schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from gestio.service.aggregation import BudgetStatus, ProgressLevel


class BudgetCreateSchema(BaseModel):
    """Schema for POST /v1/budgets request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "name": "Marketing Q3",
                    "total_amount": "1000.00",
                    "currency_code": "USD",
                    "start_date": "2024-07-01",
                    "end_date": "2024-09-30",
                }
            ]
        }
    )

    name: str = Field(..., description="Budget name", examples=["Marketing Q3"])
    total_amount: Decimal = Field(
        ...,
        description="Budget envelope; must be positive",
        examples=["1000.00"],
    )
    currency_code: str = Field(..., max_length=3, examples=["USD"])
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class BudgetUpdateSchema(BaseModel):
    """Schema for PATCH /v1/budgets/{id}. Only the fields sent are changed."""

    name: Optional[str] = None
    total_amount: Optional[Decimal] = None
    spent_amount: Optional[Decimal] = Field(
        None,
        description="Amount spent so far; maintained by hand, never derived",
    )
    currency_code: Optional[str] = Field(None, max_length=3)
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class BudgetResponseSchema(BaseModel):
    """A budget with its execution figures."""

    id: str
    name: str
    total_amount: Decimal
    spent_amount: Decimal
    currency_code: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    created_by: Optional[str] = None
    created_at: datetime
    percentage: float = Field(..., description="Spent over total, not clamped")
    remaining_amount: Decimal
    status: BudgetStatus
    progress_level: ProgressLevel


class BudgetListResponseSchema(BaseModel):
    """Schema for GET /v1/budgets."""

    budgets: List[BudgetResponseSchema]
    execution_percentage: float = Field(
        ...,
        description="Aggregate spent/total across all listed budgets",
        examples=[85.0],
    )


class BudgetAlertsResponseSchema(BaseModel):
    """Budgets at or above the user's alert threshold."""

    enabled: bool
    threshold: int = Field(..., examples=[80])
    budgets: List[BudgetResponseSchema]
