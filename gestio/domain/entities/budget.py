"""Budget entity."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Budget:
    """
    A spending envelope in a single currency.

    `spent_amount` is stored independently of transactions and is the
    source of truth for "spent". It may exceed `total_amount`.
    """

    id: str
    name: str
    total_amount: Decimal
    spent_amount: Decimal
    currency_code: str
    created_at: datetime
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    created_by: Optional[str] = None

    @property
    def is_exceeded(self) -> bool:
        return self.spent_amount > self.total_amount

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "total_amount": str(self.total_amount),
            "spent_amount": str(self.spent_amount),
            "currency_code": self.currency_code,
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "created_by": self.created_by,
            "created_at": self.created_at.isoformat(),
        }
