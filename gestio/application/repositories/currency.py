"""Read-only currency lookup."""

from typing import Dict

from gestio.domain.entities import Currency
from gestio.domain.interfaces import EntityTable, Order, Row

from .base import ReadOnlyRepository
from .rows import parse_decimal, parse_instant


class CurrencyRepository(ReadOnlyRepository[Currency]):
    """Currencies ordered by code. Reference data is never mutated here."""

    table = EntityTable.CURRENCIES
    entity_name = "currency"
    order = Order(column="code", descending=False)

    def _to_entity(self, row: Row) -> Currency:
        return Currency(
            code=row["code"],
            name=row["name"],
            symbol=row.get("symbol"),
            rate_to_usd=parse_decimal(row["rate_to_usd"]),
            updated_at=parse_instant(row["updated_at"]),
        )

    def by_code(self) -> Dict[str, Currency]:
        """Index the current mirror by currency code."""
        return {c.code: c for c in self.items}
