"""
Fixtures for integration tests.

Provides:
- In-memory SQLite database with the Gestio tables and currencies
- SqlRecordStoreClient bound to that database
- Fake auth provider with two known users
- Test client for the FastAPI app
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, AsyncGenerator, Dict, Optional
from uuid import uuid4

import pytest
import pytest_asyncio
from fastapi import Depends
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from gestio.main import app
from gestio.core.dependencies import (
    get_auth_provider,
    get_current_identity,
    get_preferences_store,
    get_record_store,
)
from gestio.core.preferences import PreferencesStore
from gestio.domain.entities import Identity, Session
from gestio.domain.exceptions import AuthException, StoreError
from gestio.domain.interfaces import AuthProvider, RecordStoreClient
from gestio.infrastructure.database import Base, CurrencyModel, SqlRecordStoreClient


ANA = Identity(id="user-ana", email="ana@example.com", full_name="Ana")
BOB = Identity(id="user-bob", email="bob@example.com", full_name="Bob")

TOKENS: Dict[str, Identity] = {"token-ana": ANA, "token-bob": BOB}
PASSWORD = "secret"

ANA_HEADERS = {"Authorization": "Bearer token-ana"}
BOB_HEADERS = {"Authorization": "Bearer token-bob"}


# =============================================================================
# Fake Auth Provider
# =============================================================================

class FakeAuthProvider(AuthProvider):
    """Auth provider that knows two users and one password."""

    def __init__(self):
        self._session: Optional[Session] = None

    async def get_session(self) -> Optional[Session]:
        return self._session

    async def get_user(self) -> Optional[Identity]:
        return self._session.user if self._session else None

    async def sign_in(self, email: str, password: str) -> Session:
        for token, user in TOKENS.items():
            if user.email == email and password == PASSWORD:
                self._session = Session(access_token=token, user=user)
                return self._session
        raise AuthException("Invalid login credentials", status_code=400)

    async def sign_up(
        self,
        email: str,
        password: str,
        full_name: Optional[str] = None,
    ) -> Identity:
        if any(user.email == email for user in TOKENS.values()):
            raise AuthException("User already registered", status_code=422)
        return Identity(id=str(uuid4()), email=email, full_name=full_name)

    async def sign_out(self) -> None:
        self._session = None

    async def fetch_user(self, access_token: str) -> Identity:
        user = TOKENS.get(access_token)
        if user is None:
            raise AuthException("invalid JWT", status_code=401)
        self._session = Session(access_token=access_token, user=user)
        return user


class BrokenRecordStore(RecordStoreClient):
    """Record store whose every call fails."""

    def __init__(self, caller: Identity):
        self._caller = caller

    async def list(self, table, filters=None, order=None, limit=None):
        raise StoreError("database is unreachable", status_code=503)

    async def create(self, table, fields):
        raise StoreError("database is unreachable", status_code=503)

    async def update(self, table, record_id, fields):
        raise StoreError("database is unreachable", status_code=503)

    async def delete(self, table, record_id):
        raise StoreError("database is unreachable", status_code=503)

    async def current_caller(self) -> Optional[Identity]:
        return self._caller


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    """Session factory with the reference currencies loaded."""
    factory = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    updated_at = datetime(2024, 3, 1, tzinfo=timezone.utc)
    async with factory() as session:
        session.add_all([
            CurrencyModel(code="USD", name="US Dollar", symbol="$", rate_to_usd=Decimal("1"), updated_at=updated_at),
            CurrencyModel(code="EUR", name="Euro", symbol="€", rate_to_usd=Decimal("1.08"), updated_at=updated_at),
            CurrencyModel(code="ARS", name="Peso argentino", symbol=None, rate_to_usd=Decimal("0.0012"), updated_at=updated_at),
        ])
        await session.commit()

    return factory


@pytest.fixture
def store(session_factory) -> SqlRecordStoreClient:
    """A SQL record store acting as Ana."""
    return SqlRecordStoreClient(session_factory, caller=ANA)


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(session_factory, tmp_path) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with mocked dependencies.

    This client:
    - Uses an in-memory SQLite database as the record store
    - Authenticates bearer tokens against FakeAuthProvider
    - Keeps preferences in a temporary file
    """
    async def override_get_record_store(
        identity: Annotated[Identity, Depends(get_current_identity)],
    ) -> RecordStoreClient:
        return SqlRecordStoreClient(session_factory, caller=identity)

    app.dependency_overrides[get_auth_provider] = FakeAuthProvider
    app.dependency_overrides[get_record_store] = override_get_record_store
    app.dependency_overrides[get_preferences_store] = (
        lambda: PreferencesStore(tmp_path / "preferences.json")
    )

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_with_broken_store(tmp_path) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client whose record store always fails."""
    async def override_get_record_store(
        identity: Annotated[Identity, Depends(get_current_identity)],
    ) -> RecordStoreClient:
        return BrokenRecordStore(identity)

    app.dependency_overrides[get_auth_provider] = FakeAuthProvider
    app.dependency_overrides[get_record_store] = override_get_record_store
    app.dependency_overrides[get_preferences_store] = (
        lambda: PreferencesStore(tmp_path / "preferences.json")
    )

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
