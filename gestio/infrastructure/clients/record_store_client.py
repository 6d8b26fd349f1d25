"""HTTP implementation of RecordStoreClient over a PostgREST endpoint."""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

import httpx
import structlog

from gestio.core.config import settings
from gestio.core.metrics import (
    record_store_failure,
    record_store_success,
    track_store_latency,
)
from gestio.domain.entities import Identity
from gestio.domain.exceptions import StoreError, StoreTimeoutError
from gestio.domain.interfaces import (
    AuthProvider,
    EntityTable,
    Order,
    RecordStoreClient,
    Row,
)

logger = structlog.get_logger(__name__)


def to_json(value: Any) -> Any:
    """Convert Decimal, date and Enum values into JSON-safe ones."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {k: to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value


class HttpRecordStoreClient(RecordStoreClient):
    """
    HTTP client for the hosted record store.

    Requests carry the project API key and, when signed in, the caller's
    access token so that row-level security applies. No retries are
    attempted here; the store's own policy governs.
    """

    REST_PATH = "/rest/v1"

    def __init__(
        self,
        auth: AuthProvider,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._auth = auth
        self._base_url = (base_url or settings.supabase_url).rstrip("/")
        self._api_key = api_key if api_key is not None else settings.supabase_anon_key
        self._timeout = timeout if timeout is not None else settings.store_timeout
        self._transport = transport

    async def list(
        self,
        table: EntityTable,
        filters: Optional[Mapping[str, Any]] = None,
        order: Optional[Order] = None,
        limit: Optional[int] = None,
    ) -> List[Row]:
        params: Dict[str, str] = {"select": "*"}
        for column, value in (filters or {}).items():
            params[column] = f"eq.{self._param(value)}"
        if order is not None:
            direction = "desc" if order.descending else "asc"
            params["order"] = f"{order.column}.{direction}"
        if limit is not None:
            params["limit"] = str(limit)

        response = await self._request("GET", table, "list", params=params)
        return self._rows(response, table, "list")

    async def create(self, table: EntityTable, fields: Mapping[str, Any]) -> Row:
        response = await self._request(
            "POST",
            table,
            "create",
            json=[to_json(fields)],
            prefer="return=representation",
        )
        rows = self._rows(response, table, "create")
        if not rows:
            raise StoreError(f"Record store returned no row for insert into {table.value}")
        return rows[0]

    async def update(
        self,
        table: EntityTable,
        record_id: str,
        fields: Mapping[str, Any],
    ) -> List[Row]:
        response = await self._request(
            "PATCH",
            table,
            "update",
            params={"id": f"eq.{record_id}"},
            json=to_json(fields),
            prefer="return=representation",
        )
        return self._rows(response, table, "update")

    async def delete(self, table: EntityTable, record_id: str) -> None:
        await self._request(
            "DELETE",
            table,
            "delete",
            params={"id": f"eq.{record_id}"},
        )

    async def current_caller(self) -> Optional[Identity]:
        return await self._auth.get_user()

    async def _request(
        self,
        method: str,
        table: EntityTable,
        operation: str,
        params: Optional[Dict[str, str]] = None,
        json: Any = None,
        prefer: Optional[str] = None,
    ) -> httpx.Response:
        """
        Send one request and translate failures into StoreError.

        Raises:
            StoreTimeoutError: If the request timed out
            StoreError: On transport errors and 4xx/5xx responses
        """
        url = f"{self._base_url}{self.REST_PATH}/{table.value}"
        headers = await self._headers(prefer)

        try:
            with track_store_latency(table.value, operation):
                async with httpx.AsyncClient(
                    timeout=self._timeout,
                    transport=self._transport,
                ) as client:
                    response = await client.request(
                        method,
                        url,
                        params=params,
                        json=json,
                        headers=headers,
                    )
        except httpx.TimeoutException:
            record_store_failure(table.value, operation)
            logger.warning("store_timeout", table=table.value, operation=operation)
            raise StoreTimeoutError()
        except httpx.HTTPError as e:
            record_store_failure(table.value, operation)
            logger.error(
                "store_unreachable",
                table=table.value,
                operation=operation,
                error=str(e),
            )
            raise StoreError(f"Record store unreachable: {e}")

        if response.status_code >= 400:
            record_store_failure(table.value, operation)
            message = self._error_message(response)
            logger.warning(
                "store_request_failed",
                table=table.value,
                operation=operation,
                status_code=response.status_code,
                error=message,
            )
            raise StoreError(message, status_code=response.status_code)

        record_store_success(table.value, operation)
        return response

    def _rows(self, response: httpx.Response, table: EntityTable, operation: str) -> List[Row]:
        """
        Decode a 2xx body that must be a JSON array of objects.

        Raises:
            StoreError: If the body is not JSON or not a list of rows
        """
        try:
            body = response.json()
        except ValueError:
            body = None

        if not isinstance(body, list) or not all(isinstance(row, dict) for row in body):
            record_store_failure(table.value, operation)
            logger.error(
                "store_invalid_response",
                table=table.value,
                operation=operation,
                status_code=response.status_code,
                content_type=response.headers.get("content-type"),
            )
            raise StoreError(
                "Record store returned an invalid response",
                status_code=response.status_code,
            )
        return body

    async def _headers(self, prefer: Optional[str]) -> Dict[str, str]:
        session = await self._auth.get_session()
        token = session.access_token if session else self._api_key
        headers = {
            "apikey": self._api_key,
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }
        if prefer:
            headers["Prefer"] = prefer
        return headers

    @staticmethod
    def _param(value: Any) -> str:
        value = to_json(value)
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            for key in ("message", "error_description", "msg", "error"):
                if body.get(key):
                    return str(body[key])
        return f"Record store error ({response.status_code}): {response.text[:200]}"
