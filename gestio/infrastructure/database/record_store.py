"""SQLAlchemy implementation of RecordStoreClient."""

from contextlib import asynccontextmanager
from enum import Enum
from typing import Any, AsyncGenerator, Dict, List, Mapping, Optional, Type

import structlog
from sqlalchemy import inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from gestio.core.metrics import (
    record_store_failure,
    record_store_success,
    track_store_latency,
)
from gestio.domain.entities import Identity
from gestio.domain.exceptions import StoreError
from gestio.domain.interfaces import EntityTable, Order, RecordStoreClient, Row

from .models import (
    Base,
    BudgetModel,
    CurrencyModel,
    LogisticsProcessModel,
    TransactionModel,
)

logger = structlog.get_logger(__name__)

MODELS: Dict[EntityTable, Type[Base]] = {
    EntityTable.BUDGETS: BudgetModel,
    EntityTable.TRANSACTIONS: TransactionModel,
    EntityTable.LOGISTICS_PROCESSES: LogisticsProcessModel,
    EntityTable.CURRENCIES: CurrencyModel,
}


class SqlRecordStoreClient(RecordStoreClient):
    """
    Record store backed by a SQL database.

    Applies the same row-level rule as the hosted store: rows carrying a
    `created_by` column are visible to, and writable by, their creator
    only. Writes outside that scope change nothing.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        caller: Optional[Identity] = None,
    ):
        self._session_factory = session_factory
        self._caller = caller

    def set_caller(self, caller: Optional[Identity]) -> None:
        self._caller = caller

    async def current_caller(self) -> Optional[Identity]:
        return self._caller

    async def list(
        self,
        table: EntityTable,
        filters: Optional[Mapping[str, Any]] = None,
        order: Optional[Order] = None,
        limit: Optional[int] = None,
    ) -> List[Row]:
        model = MODELS[table]
        stmt = self._scoped(model, select(model))
        for column, value in (filters or {}).items():
            stmt = stmt.where(self._column(model, column) == _plain(value))
        if order is not None:
            column = self._column(model, order.column)
            stmt = stmt.order_by(column.desc() if order.descending else column.asc())
        if limit is not None:
            stmt = stmt.limit(limit)

        async with self._session(table, "list") as session:
            result = await session.execute(stmt)
            return [_to_row(obj) for obj in result.scalars().all()]

    async def create(self, table: EntityTable, fields: Mapping[str, Any]) -> Row:
        model = MODELS[table]
        values = {self._column(model, k).key: _plain(v) for k, v in fields.items()}

        async with self._session(table, "create") as session:
            obj = model(**values)
            session.add(obj)
            await session.flush()
            await session.refresh(obj)
            return _to_row(obj)

    async def update(
        self,
        table: EntityTable,
        record_id: str,
        fields: Mapping[str, Any],
    ) -> List[Row]:
        model = MODELS[table]
        for column in fields:
            self._column(model, column)

        async with self._session(table, "update") as session:
            obj = await self._get_scoped(session, model, record_id)
            if obj is None:
                return []
            for column, value in fields.items():
                setattr(obj, column, _plain(value))
            await session.flush()
            await session.refresh(obj)
            return [_to_row(obj)]

    async def delete(self, table: EntityTable, record_id: str) -> None:
        model = MODELS[table]
        async with self._session(table, "delete") as session:
            obj = await self._get_scoped(session, model, record_id)
            if obj is not None:
                await session.delete(obj)

    @asynccontextmanager
    async def _session(
        self,
        table: EntityTable,
        operation: str,
    ) -> AsyncGenerator[AsyncSession, None]:
        """
        Run one store call in its own transaction.

        Raises:
            StoreError: If the database rejects the statement
        """
        try:
            with track_store_latency(table.value, operation):
                async with self._session_factory() as session:
                    async with session.begin():
                        yield session
        except SQLAlchemyError as e:
            record_store_failure(table.value, operation)
            logger.error(
                "store_query_failed",
                table=table.value,
                operation=operation,
                error=str(e),
            )
            raise StoreError(f"Database error: {e}") from e

        record_store_success(table.value, operation)

    async def _get_scoped(self, session: AsyncSession, model: Type[Base], record_id: str):
        key = inspect(model).primary_key[0]
        stmt = self._scoped(model, select(model).where(key == record_id))
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    def _scoped(self, model: Type[Base], stmt):
        if "created_by" not in model.__table__.c:
            return stmt
        caller_id = self._caller.id if self._caller else None
        return stmt.where(model.__table__.c.created_by == caller_id)

    @staticmethod
    def _column(model: Type[Base], name: str):
        if name not in model.__table__.c:
            raise StoreError(
                f"Column '{name}' does not exist on {model.__tablename__}",
                status_code=400,
            )
        return model.__table__.c[name]


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _to_row(obj: Base) -> Row:
    return {attr.key: getattr(obj, attr.key) for attr in inspect(obj).mapper.column_attrs}
