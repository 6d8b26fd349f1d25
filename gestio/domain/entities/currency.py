"""Currency reference data."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Currency:
    """Immutable currency row; looked up, never mutated."""

    code: str
    name: str
    rate_to_usd: Decimal
    updated_at: datetime
    symbol: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "name": self.name,
            "symbol": self.symbol,
            "rate_to_usd": str(self.rate_to_usd),
            "updated_at": self.updated_at.isoformat(),
        }
