"""Engine and session factory for the SQL store backend."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from gestio.core.config import settings


def async_database_url(url: str) -> str:
    """Point postgres URLs at the asyncpg driver; leave others untouched."""
    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return url.replace(prefix, "postgresql+asyncpg://", 1)
    return url


class DatabaseSessionManager:
    """
    Owns the async engine used by SqlRecordStoreClient.

    Only initialized when `store_backend` is "sql"; the REST backend
    never touches it.
    """

    def __init__(self):
        self._engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None

    def init(self, database_url: str | None = None) -> None:
        """
        Create the engine and session factory.

        Args:
            database_url: Optional override for settings.database_url
        """
        url = async_database_url(database_url or settings.database_url)

        # SQLite (tests, local runs) has no connection pool to size
        pool_options = {}
        if not url.startswith("sqlite"):
            pool_options = {
                "pool_size": settings.db_pool_size,
                "max_overflow": settings.db_max_overflow,
                "pool_pre_ping": True,
            }

        self._engine = create_async_engine(url, echo=settings.debug, **pool_options)
        self._sessionmaker = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @property
    def initialized(self) -> bool:
        return self._sessionmaker is not None

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._sessionmaker is None:
            raise RuntimeError("Database not initialized. Call init() first.")
        return self._sessionmaker

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._sessionmaker = None


db_manager = DatabaseSessionManager()
