"""
Fixtures for unit tests.

Provides:
- Entity factories with fixed timestamps
- An in-memory record store that mimics the hosted store's row shapes
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

import pytest

from gestio.domain.entities import (
    Budget,
    Identity,
    LogisticsProcess,
    ProcessStatus,
    Transaction,
    TransactionType,
)
from gestio.domain.exceptions import StoreError
from gestio.domain.interfaces import EntityTable, Order, RecordStoreClient, Row
from gestio.infrastructure.clients.record_store_client import to_json

BASE_TIME = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)

CALLER = Identity(id="user-1", email="ana@example.com", full_name="Ana")


# =============================================================================
# Entity Factories
# =============================================================================

def make_transaction(
    amount: str | int,
    type: TransactionType = TransactionType.INCOME,
    created_at: datetime = BASE_TIME,
    currency_code: str = "USD",
    description: Optional[str] = None,
    budget_id: Optional[str] = None,
) -> Transaction:
    return Transaction(
        id=str(uuid4()),
        amount=Decimal(str(amount)),
        currency_code=currency_code,
        type=type,
        created_at=created_at,
        description=description,
        budget_id=budget_id,
    )


def make_budget(
    total: str | int,
    spent: str | int = 0,
    name: str = "Budget",
    currency_code: str = "USD",
) -> Budget:
    return Budget(
        id=str(uuid4()),
        name=name,
        total_amount=Decimal(str(total)),
        spent_amount=Decimal(str(spent)),
        currency_code=currency_code,
        created_at=BASE_TIME,
    )


def make_process(
    status: ProcessStatus = ProcessStatus.PENDING,
    name: str = "Process",
) -> LogisticsProcess:
    return LogisticsProcess(
        id=str(uuid4()),
        name=name,
        status=status,
        created_at=BASE_TIME,
        updated_at=BASE_TIME,
    )


# =============================================================================
# Fake Record Store
# =============================================================================

class FakeRecordStore(RecordStoreClient):
    """
    In-memory record store.

    Rows are kept JSON-shaped (amounts and timestamps as strings) like
    the hosted store returns them. Every new row is one minute newer
    than the previous one.
    """

    def __init__(self, caller: Optional[Identity] = CALLER):
        self.caller = caller
        self.tables: Dict[EntityTable, List[Row]] = {t: [] for t in EntityTable}
        self.calls: List[str] = []
        self.failures: Dict[str, StoreError] = {}
        self.deny_writes = False
        self._clock = BASE_TIME

    def fail(self, operation: str, message: str = "store unavailable") -> None:
        self.failures[operation] = StoreError(message, status_code=503)

    def recover(self) -> None:
        self.failures.clear()

    def seed(self, table: EntityTable, **fields: Any) -> Row:
        self._clock += timedelta(minutes=1)
        row = {
            "id": str(uuid4()),
            "created_at": self._clock.isoformat(),
            "created_by": self.caller.id if self.caller else None,
            **to_json(fields),
        }
        if table == EntityTable.LOGISTICS_PROCESSES:
            row.setdefault("updated_at", row["created_at"])
        self.tables[table].append(row)
        return dict(row)

    def _check(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.failures:
            raise self.failures[operation]

    async def list(
        self,
        table: EntityTable,
        filters: Optional[Mapping[str, Any]] = None,
        order: Optional[Order] = None,
        limit: Optional[int] = None,
    ) -> List[Row]:
        self._check("list")
        rows = [
            dict(r) for r in self.tables[table]
            if all(r.get(k) == v for k, v in (filters or {}).items())
        ]
        if order is not None:
            rows.sort(key=lambda r: r[order.column], reverse=order.descending)
        if limit is not None:
            rows = rows[:limit]
        return rows

    async def create(self, table: EntityTable, fields: Mapping[str, Any]) -> Row:
        self._check("create")
        return self.seed(table, **fields)

    async def update(
        self,
        table: EntityTable,
        record_id: str,
        fields: Mapping[str, Any],
    ) -> List[Row]:
        self._check("update")
        if self.deny_writes:
            return []
        for row in self.tables[table]:
            if row["id"] == record_id:
                row.update(to_json(fields))
                return [dict(row)]
        return []

    async def delete(self, table: EntityTable, record_id: str) -> None:
        self._check("delete")
        if self.deny_writes:
            return
        self.tables[table] = [r for r in self.tables[table] if r["id"] != record_id]

    async def current_caller(self) -> Optional[Identity]:
        return self.caller


@pytest.fixture
def store() -> FakeRecordStore:
    """A record store with a signed-in caller and no rows."""
    return FakeRecordStore()


@pytest.fixture
def anonymous_store() -> FakeRecordStore:
    """A record store without a signed-in caller."""
    return FakeRecordStore(caller=None)
