"""Transaction-related Pydantic schemas."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from gestio.domain.entities import TransactionType


class TransactionCreateSchema(BaseModel):
    """Schema for POST /v1/transactions request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "amount": "100.00",
                    "currency_code": "USD",
                    "type": "income",
                    "description": "Invoice #42",
                }
            ]
        }
    )

    amount: Decimal = Field(
        ...,
        description="Positive amount; direction is given by `type`",
        examples=["100.00"],
    )
    currency_code: str = Field(..., max_length=3, examples=["USD"])
    type: TransactionType
    description: Optional[str] = None
    budget_id: Optional[str] = None


class TransactionUpdateSchema(BaseModel):
    """Schema for PATCH /v1/transactions/{id}."""

    amount: Optional[Decimal] = None
    currency_code: Optional[str] = Field(None, max_length=3)
    type: Optional[TransactionType] = None
    description: Optional[str] = None
    budget_id: Optional[str] = None


class TransactionResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    amount: Decimal
    currency_code: str
    type: TransactionType
    description: Optional[str] = None
    budget_id: Optional[str] = None
    created_by: Optional[str] = None
    created_at: datetime


class TransactionListResponseSchema(BaseModel):
    """Schema for GET /v1/transactions."""

    transactions: List[TransactionResponseSchema]
    total_liquidity: Decimal = Field(
        ...,
        description="Income minus expenses of the listed rows, unconverted",
    )
    total_income: Decimal
    total_expense: Decimal
    currencies: List[str] = Field(
        ...,
        description="Distinct currency codes among the listed rows",
    )
