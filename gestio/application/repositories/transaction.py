"""Transaction repository."""

from typing import Callable, List, Optional, Tuple

from gestio.application.refresh import RefreshScheduler
from gestio.domain.entities import Transaction, TransactionType
from gestio.domain.interfaces import EntityTable, RecordStoreClient, Row
from gestio.service.aggregation.settings import aggregation_settings

from .base import EntityRepository
from .rows import coerce_amount, parse_decimal, parse_instant, require_text


def transaction_from_row(row: Row) -> Transaction:
    return Transaction(
        id=str(row["id"]),
        amount=parse_decimal(row["amount"]),
        currency_code=row["currency_code"],
        type=TransactionType(row["type"]),
        description=row.get("description"),
        budget_id=row.get("budget_id"),
        created_by=row.get("created_by"),
        created_at=parse_instant(row["created_at"]),
    )


class TransactionRepository(EntityRepository[Transaction]):
    """
    The most recent transactions, newest first.

    Only the latest `limit` rows are mirrored (10 by default; exports
    ask for up to 1000).
    """

    table = EntityTable.TRANSACTIONS
    entity_name = "transaction"

    def __init__(self, store: RecordStoreClient, limit: Optional[int] = None):
        super().__init__(
            store,
            limit=limit if limit is not None else aggregation_settings.default_transaction_limit,
        )

    @property
    def limit(self) -> int:
        return self._limit

    def _to_entity(self, row: Row) -> Transaction:
        return transaction_from_row(row)

    def _normalize(self, fields: dict, partial: bool) -> Tuple[dict, List[str]]:
        errors: List[str] = []
        if not partial and "amount" not in fields:
            errors.append("amount is required")
        coerce_amount(fields, "amount", errors)
        require_text(fields, "currency_code", errors, partial)

        if "type" in fields:
            try:
                fields["type"] = TransactionType(fields["type"]).value
            except ValueError:
                errors.append("type must be 'income' or 'expense'")
        elif not partial:
            errors.append("type is required")

        if "description" in fields and fields["description"] is not None:
            fields["description"] = str(fields["description"]).strip() or None

        return fields, errors

    def auto_refresh(
        self,
        interval: Optional[float] = None,
        on_refresh: Optional[Callable[[List[Transaction]], None]] = None,
    ) -> RefreshScheduler:
        """
        A scheduler that re-runs `list()` every `interval` seconds.

        The caller owns its lifetime: start it when the view appears and
        stop it (or leave its `async with` block) when the view goes away.
        """
        async def refresh() -> None:
            items = await self.list()
            if on_refresh is not None:
                on_refresh(items)

        return RefreshScheduler(
            refresh,
            interval=interval,
            name=f"{self.entity_name}_refresh",
        )
