"""Currency Pydantic schemas."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class CurrencyResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: str
    name: str
    symbol: Optional[str] = None
    rate_to_usd: Decimal
    updated_at: datetime


class CurrencyListResponseSchema(BaseModel):
    currencies: List[CurrencyResponseSchema]
