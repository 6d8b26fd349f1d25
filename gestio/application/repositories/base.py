"""
Entity repositories: an in-memory list mirror over one store table.

Every repository owns the same protocol:
- `list()` replaces the mirror with the store's current rows
- mutations go to the store, then re-run `list()` instead of patching
  the mirror locally
- no call raises to its caller; failures come back as messages
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Mapping, Optional, Tuple, TypeVar

import structlog

from gestio.application.dto.result import OperationResult
from gestio.core.metrics import record_repository_operation
from gestio.domain.entities import Identity
from gestio.domain.exceptions import (
    DomainException,
    InvalidRecordException,
    StoreError,
)
from gestio.domain.interfaces import EntityTable, Order, RecordStoreClient, Row

logger = structlog.get_logger(__name__)

E = TypeVar("E")


class ReadOnlyRepository(ABC, Generic[E]):
    """
    List mirror for a single table.

    Attributes:
        items: Entities from the last successful fetch
        loading: True while a fetch is in flight
        error: Message from the last failed fetch, cleared on success
    """

    table: EntityTable
    entity_name: str
    order: Order = Order()

    def __init__(self, store: RecordStoreClient, limit: Optional[int] = None):
        self._store = store
        self._limit = limit
        self._caller_id: Optional[str] = None
        self.items: List[E] = []
        self.loading = False
        self.error: Optional[str] = None

    @abstractmethod
    def _to_entity(self, row: Row) -> E:
        """Convert a store row to a domain entity."""
        ...

    async def list(self) -> List[E]:
        """
        Refresh the mirror from the store.

        Skipped when there is no authenticated caller. On failure the
        previous mirror is kept and `error` is set.
        """
        log = logger.bind(entity=self.entity_name)
        self.loading = True
        try:
            caller = await self._store.current_caller()
            if caller is None:
                log.debug("list_skipped_no_caller")
                return self.items

            rows = await self._store.list(self.table, order=self.order, limit=self._limit)
            self.items = self._to_entities(rows)
            self.error = None
            log.debug("list_refreshed", count=len(self.items))
        except DomainException as e:
            self.error = e.message
            log.warning("list_failed", error=e.message)
        finally:
            self.loading = False

        return self.items

    async def watch_caller(self, identity: Optional[Identity]) -> None:
        """Re-fetch whenever the authenticated caller changes."""
        caller_id = identity.id if identity else None
        if caller_id == self._caller_id:
            return
        self._caller_id = caller_id
        if caller_id is not None:
            await self.list()

    def _to_entities(self, rows: List[Row]) -> List[E]:
        return [self._to_entity_checked(row) for row in rows]

    def _to_entity_checked(self, row: Row) -> E:
        try:
            return self._to_entity(row)
        except (KeyError, TypeError, ValueError, ArithmeticError) as e:
            raise StoreError(f"Malformed {self.entity_name} row: {e}") from e


class EntityRepository(ReadOnlyRepository[E]):
    """List mirror plus create/update/delete with refetch-after-mutation."""

    IMMUTABLE_FIELDS = frozenset({"id", "created_at", "updated_at", "created_by"})
    # Extra fields the store assigns on create
    CREATE_ASSIGNED_FIELDS: frozenset = frozenset()

    @abstractmethod
    def _normalize(self, fields: dict, partial: bool) -> Tuple[dict, List[str]]:
        """
        Validate and coerce mutation fields.

        Returns:
            The coerced fields and a list of validation errors
        """
        ...

    def _defaults(self) -> dict:
        """Fields set on every new row before the caller's values."""
        return {}

    async def create(self, fields: Mapping[str, Any]) -> OperationResult[E]:
        """
        Create a row, attach the caller as creator, then refresh.

        Client-supplied ids, timestamps and creator are discarded.
        """
        log = logger.bind(entity=self.entity_name)
        payload = {
            **self._defaults(),
            **_without(fields, self.IMMUTABLE_FIELDS | self.CREATE_ASSIGNED_FIELDS),
        }

        try:
            payload, errors = self._normalize(payload, partial=False)
            if errors:
                raise InvalidRecordException(errors)

            caller = await self._store.current_caller()
            payload["created_by"] = caller.id if caller else None

            row = await self._store.create(self.table, payload)
            created = self._to_entity_checked(row)
        except DomainException as e:
            log.warning("create_failed", code=e.code, error=e.message)
            record_repository_operation(self.entity_name, "create", "error")
            return OperationResult.failure(e.message, e.code)

        log.info("record_created", id=row.get("id"))
        record_repository_operation(self.entity_name, "create", "ok")
        await self.list()
        return OperationResult.success(created)

    async def update(self, record_id: str, fields: Mapping[str, Any]) -> OperationResult[E]:
        """
        Apply a partial update, then refresh.

        A call that the store accepts but that changes no row (unknown id,
        or a write filtered by a row-level policy) is a soft failure:
        no error, no data, and a warning.
        """
        log = logger.bind(entity=self.entity_name, id=record_id)
        payload = _without(fields, self.IMMUTABLE_FIELDS)

        try:
            payload, errors = self._normalize(payload, partial=True)
            if not payload and not errors:
                errors = ["no fields to update"]
            if errors:
                raise InvalidRecordException(errors)

            rows = await self._store.update(self.table, record_id, payload)
            updated = self._to_entity_checked(rows[0]) if rows else None
        except DomainException as e:
            log.warning("update_failed", code=e.code, error=e.message)
            record_repository_operation(self.entity_name, "update", "error")
            return OperationResult.failure(e.message, e.code)

        await self.list()

        if updated is None:
            log.warning("update_affected_no_rows")
            record_repository_operation(self.entity_name, "update", "soft_failure")
            return OperationResult.no_change()

        log.info("record_updated")
        record_repository_operation(self.entity_name, "update", "ok")
        return OperationResult.success(updated)

    async def delete(self, record_id: str) -> OperationResult[None]:
        """
        Delete a row by id, then refresh.

        The store does not report how many rows a delete removed, so an
        unknown or hidden id still comes back as success with no warning.
        """
        log = logger.bind(entity=self.entity_name, id=record_id)
        try:
            await self._store.delete(self.table, record_id)
        except DomainException as e:
            log.warning("delete_failed", code=e.code, error=e.message)
            record_repository_operation(self.entity_name, "delete", "error")
            return OperationResult.failure(e.message, e.code)

        log.info("record_deleted")
        record_repository_operation(self.entity_name, "delete", "ok")
        await self.list()
        return OperationResult.success()


def _without(fields: Mapping[str, Any], excluded: frozenset) -> dict:
    return {k: v for k, v in fields.items() if k not in excluded}
