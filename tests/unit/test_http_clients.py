"""
Unit tests for the HTTP record store and auth clients.

Requests are answered by httpx.MockTransport handlers, so these tests
check the wire conventions (paths, query parameters, headers, bodies)
and the translation of failures into domain exceptions.
"""

import json
from decimal import Decimal
from typing import Callable, List

import httpx
import pytest

from gestio.application.repositories import TransactionRepository
from gestio.domain.entities import Identity, Session
from gestio.domain.exceptions import AuthException, StoreError, StoreTimeoutError
from gestio.domain.interfaces import EntityTable, Order
from gestio.infrastructure.clients import HttpAuthProvider, HttpRecordStoreClient

BASE_URL = "https://project.supabase.test"
ANON_KEY = "anon-key"

USER_JSON = {
    "id": "user-1",
    "email": "ana@example.com",
    "user_metadata": {"full_name": "Ana"},
}


def recording_transport(
    handler: Callable[[httpx.Request], httpx.Response],
    requests: List[httpx.Request],
) -> httpx.MockTransport:
    def record(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    return httpx.MockTransport(record)


def signed_in_auth() -> HttpAuthProvider:
    return HttpAuthProvider(
        base_url=BASE_URL,
        api_key=ANON_KEY,
        session=Session(access_token="user-token", user=Identity(id="user-1")),
    )


def store_client(handler, requests, auth=None) -> HttpRecordStoreClient:
    return HttpRecordStoreClient(
        auth or signed_in_auth(),
        base_url=BASE_URL,
        api_key=ANON_KEY,
        transport=recording_transport(handler, requests),
    )


# =============================================================================
# HttpRecordStoreClient
# =============================================================================

class TestRecordStoreClient:

    @pytest.mark.asyncio
    async def test_list_query(self):
        requests: List[httpx.Request] = []
        client = store_client(lambda r: httpx.Response(200, json=[{"id": "1"}]), requests)

        rows = await client.list(
            EntityTable.TRANSACTIONS,
            filters={"currency_code": "USD"},
            order=Order(),
            limit=10,
        )

        assert rows == [{"id": "1"}]
        request = requests[0]
        assert request.method == "GET"
        assert request.url.path == "/rest/v1/transactions"
        assert request.url.params["select"] == "*"
        assert request.url.params["order"] == "created_at.desc"
        assert request.url.params["limit"] == "10"
        assert request.url.params["currency_code"] == "eq.USD"

    @pytest.mark.asyncio
    async def test_caller_token_and_api_key_are_sent(self):
        requests: List[httpx.Request] = []
        client = store_client(lambda r: httpx.Response(200, json=[]), requests)

        await client.list(EntityTable.BUDGETS)

        assert requests[0].headers["apikey"] == ANON_KEY
        assert requests[0].headers["Authorization"] == "Bearer user-token"

    @pytest.mark.asyncio
    async def test_anonymous_requests_use_api_key(self):
        requests: List[httpx.Request] = []
        auth = HttpAuthProvider(base_url=BASE_URL, api_key=ANON_KEY)
        client = store_client(lambda r: httpx.Response(200, json=[]), requests, auth=auth)

        await client.list(EntityTable.CURRENCIES)

        assert requests[0].headers["Authorization"] == f"Bearer {ANON_KEY}"
        assert await client.current_caller() is None

    @pytest.mark.asyncio
    async def test_create_returns_representation(self):
        requests: List[httpx.Request] = []
        client = store_client(
            lambda r: httpx.Response(201, json=[{"id": "new", "amount": "10.50"}]),
            requests,
        )

        row = await client.create(
            EntityTable.TRANSACTIONS,
            {"amount": Decimal("10.50"), "type": "income"},
        )

        assert row == {"id": "new", "amount": "10.50"}
        request = requests[0]
        assert request.method == "POST"
        assert request.headers["Prefer"] == "return=representation"
        assert json.loads(request.content) == [{"amount": "10.50", "type": "income"}]

    @pytest.mark.asyncio
    async def test_update_returns_affected_rows(self):
        requests: List[httpx.Request] = []
        client = store_client(lambda r: httpx.Response(200, json=[]), requests)

        rows = await client.update(EntityTable.BUDGETS, "b-1", {"name": "x"})

        assert rows == []
        assert requests[0].method == "PATCH"
        assert requests[0].url.params["id"] == "eq.b-1"

    @pytest.mark.asyncio
    async def test_delete_by_id(self):
        requests: List[httpx.Request] = []
        client = store_client(lambda r: httpx.Response(204), requests)

        await client.delete(EntityTable.LOGISTICS_PROCESSES, "p-1")

        assert requests[0].method == "DELETE"
        assert requests[0].url.params["id"] == "eq.p-1"

    @pytest.mark.asyncio
    async def test_error_status_raises_store_error(self):
        client = store_client(
            lambda r: httpx.Response(403, json={"message": "new row violates row-level security policy"}),
            [],
        )

        with pytest.raises(StoreError) as exc_info:
            await client.create(EntityTable.BUDGETS, {"name": "x"})

        assert exc_info.value.status_code == 403
        assert "row-level security" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_timeout_raises_store_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(StoreTimeoutError):
            await store_client(handler, []).list(EntityTable.BUDGETS)

    @pytest.mark.asyncio
    async def test_connection_error_raises_store_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(StoreError) as exc_info:
            await store_client(handler, []).list(EntityTable.BUDGETS)

        assert not isinstance(exc_info.value, StoreTimeoutError)

    @pytest.mark.asyncio
    async def test_non_json_body_raises_store_error(self):
        client = store_client(
            lambda r: httpx.Response(200, text="<html>gateway</html>"),
            [],
        )

        with pytest.raises(StoreError) as exc_info:
            await client.list(EntityTable.TRANSACTIONS)

        assert exc_info.value.message == "Record store returned an invalid response"

    @pytest.mark.parametrize("body", [{"id": "b-1"}, ["b-1"], None])
    @pytest.mark.asyncio
    async def test_body_that_is_not_a_row_list_raises_store_error(self, body):
        client = store_client(lambda r: httpx.Response(201, json=body), [])

        with pytest.raises(StoreError):
            await client.create(EntityTable.BUDGETS, {"name": "x"})

    @pytest.mark.asyncio
    async def test_update_with_object_body_raises_store_error(self):
        client = store_client(lambda r: httpx.Response(200, json={"id": "b-1"}), [])

        with pytest.raises(StoreError):
            await client.update(EntityTable.BUDGETS, "b-1", {"name": "x"})


class TestRepositoryOverHttp:

    @pytest.mark.asyncio
    async def test_garbled_list_keeps_previous_items(self):
        responses = [
            httpx.Response(200, json=[{
                "id": "t-1",
                "amount": "12.50",
                "currency_code": "USD",
                "type": "income",
                "created_at": "2024-03-05T10:00:00+00:00",
            }]),
            httpx.Response(200, text="<html>gateway</html>"),
        ]
        repo = TransactionRepository(store_client(lambda r: responses.pop(0), []))

        first = await repo.list()
        second = await repo.list()

        assert [t.id for t in first] == ["t-1"]
        assert [t.id for t in second] == ["t-1"]
        assert repo.error == "Record store returned an invalid response"
        assert repo.loading is False

    @pytest.mark.asyncio
    async def test_object_body_on_create_is_a_failure(self):
        requests: List[httpx.Request] = []
        repo = TransactionRepository(
            store_client(lambda r: httpx.Response(201, json={"id": "t-1"}), requests)
        )

        result = await repo.create({"amount": "10", "currency_code": "USD", "type": "income"})

        assert result.code == "STORE_ERROR"
        assert result.data is None
        assert repo.items == []
        assert [r.method for r in requests] == ["POST"]


# =============================================================================
# HttpAuthProvider
# =============================================================================

def auth_client(handler, requests, session=None) -> HttpAuthProvider:
    return HttpAuthProvider(
        base_url=BASE_URL,
        api_key=ANON_KEY,
        session=session,
        transport=recording_transport(handler, requests),
    )


class TestAuthProvider:

    @pytest.mark.asyncio
    async def test_sign_in_keeps_session(self):
        requests: List[httpx.Request] = []
        auth = auth_client(
            lambda r: httpx.Response(200, json={
                "access_token": "tok",
                "refresh_token": "ref",
                "expires_at": 1710000000,
                "user": USER_JSON,
            }),
            requests,
        )

        session = await auth.sign_in("ana@example.com", "secret")

        assert session.access_token == "tok"
        assert session.expires_at.year == 2024
        assert (await auth.get_user()) == Identity(id="user-1", email="ana@example.com", full_name="Ana")
        assert requests[0].url.path == "/auth/v1/token"
        assert requests[0].url.params["grant_type"] == "password"

    @pytest.mark.asyncio
    async def test_rejected_credentials(self):
        auth = auth_client(
            lambda r: httpx.Response(400, json={"error_description": "Invalid login credentials"}),
            [],
        )

        with pytest.raises(AuthException) as exc_info:
            await auth.sign_in("ana@example.com", "wrong")

        assert exc_info.value.message == "Invalid login credentials"
        assert await auth.get_session() is None

    @pytest.mark.asyncio
    async def test_sign_up_sends_full_name(self):
        requests: List[httpx.Request] = []
        auth = auth_client(lambda r: httpx.Response(200, json=USER_JSON), requests)

        user = await auth.sign_up("ana@example.com", "secret", full_name="Ana")

        assert user.full_name == "Ana"
        assert json.loads(requests[0].content)["data"] == {"full_name": "Ana"}
        assert await auth.get_session() is None

    @pytest.mark.asyncio
    async def test_sign_out_clears_session(self):
        requests: List[httpx.Request] = []
        auth = auth_client(
            lambda r: httpx.Response(204),
            requests,
            session=Session(access_token="tok", user=Identity(id="user-1")),
        )

        await auth.sign_out()

        assert await auth.get_user() is None
        assert requests[0].url.path == "/auth/v1/logout"
        assert requests[0].headers["Authorization"] == "Bearer tok"

    @pytest.mark.asyncio
    async def test_fetch_user_adopts_token(self):
        auth = auth_client(lambda r: httpx.Response(200, json=USER_JSON), [])

        user = await auth.fetch_user("tok")

        assert user.id == "user-1"
        assert (await auth.get_session()).access_token == "tok"

    @pytest.mark.asyncio
    async def test_expired_token(self):
        auth = auth_client(lambda r: httpx.Response(401, json={"msg": "JWT expired"}), [])

        with pytest.raises(AuthException) as exc_info:
            await auth.fetch_user("old")

        assert exc_info.value.status_code == 401
