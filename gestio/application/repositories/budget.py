"""Budget repository."""

from decimal import Decimal
from typing import List, Tuple

from gestio.domain.entities import Budget
from gestio.domain.interfaces import EntityTable, Row

from .base import EntityRepository
from .rows import (
    coerce_amount,
    coerce_date,
    parse_date,
    parse_decimal,
    parse_instant,
    require_text,
)


def budget_from_row(row: Row) -> Budget:
    return Budget(
        id=str(row["id"]),
        name=row["name"],
        total_amount=parse_decimal(row["total_amount"]),
        spent_amount=parse_decimal(row.get("spent_amount") or 0),
        currency_code=row["currency_code"],
        start_date=parse_date(row.get("start_date")),
        end_date=parse_date(row.get("end_date")),
        created_by=row.get("created_by"),
        created_at=parse_instant(row["created_at"]),
    )


class BudgetRepository(EntityRepository[Budget]):
    """
    Budgets, newest first.

    `spent_amount` always starts at zero: any value supplied on create
    is discarded. It can be changed later through `update`.
    """

    table = EntityTable.BUDGETS
    entity_name = "budget"
    CREATE_ASSIGNED_FIELDS = frozenset({"spent_amount"})

    def _to_entity(self, row: Row) -> Budget:
        return budget_from_row(row)

    def _defaults(self) -> dict:
        return {"spent_amount": Decimal("0")}

    def _normalize(self, fields: dict, partial: bool) -> Tuple[dict, List[str]]:
        errors: List[str] = []
        require_text(fields, "name", errors, partial)
        require_text(fields, "currency_code", errors, partial)
        if not partial and "total_amount" not in fields:
            errors.append("total_amount is required")
        coerce_amount(fields, "total_amount", errors)
        coerce_amount(fields, "spent_amount", errors, allow_zero=True)
        coerce_date(fields, "start_date", errors)
        coerce_date(fields, "end_date", errors)

        start, end = fields.get("start_date"), fields.get("end_date")
        if start and end and not errors and start > end:
            errors.append("start_date must not be after end_date")

        return fields, errors
