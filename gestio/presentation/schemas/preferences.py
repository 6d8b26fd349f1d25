"""User preference Pydantic schemas."""

from typing import Literal, Optional

from pydantic import BaseModel


class PreferencesUpdateSchema(BaseModel):
    """Schema for PUT /v1/settings/preferences. Omitted fields keep their value."""

    language: Optional[Literal["es", "en", "pt"]] = None
    default_currency: Optional[Literal["USD", "EUR", "BRL", "ARS"]] = None
    date_format: Optional[Literal["DD/MM/YYYY", "MM/DD/YYYY"]] = None
    budget_alerts: Optional[bool] = None
    budget_threshold: Optional[Literal[70, 80, 90]] = None
