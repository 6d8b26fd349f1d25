"""External client interfaces."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from gestio.domain.entities import Identity, Session

Row = Dict[str, Any]


class EntityTable(str, Enum):
    """Tables exposed by the record store."""

    BUDGETS = "budgets"
    TRANSACTIONS = "transactions"
    LOGISTICS_PROCESSES = "logistics_processes"
    CURRENCIES = "currencies"


@dataclass(frozen=True)
class Order:
    """Ordering clause for a list request."""

    column: str = "created_at"
    descending: bool = True


class RecordStoreClient(ABC):
    """
    Abstract client for the hosted record store.

    Rows are plain dictionaries keyed by column name. Every method
    raises StoreError on network, validation or authorization failure.
    """

    @abstractmethod
    async def list(
        self,
        table: EntityTable,
        filters: Optional[Mapping[str, Any]] = None,
        order: Optional[Order] = None,
        limit: Optional[int] = None,
    ) -> List[Row]:
        """
        Fetch rows from a table.

        Args:
            table: The table to read
            filters: Column equality filters
            order: Optional ordering clause
            limit: Maximum number of rows to return

        Returns:
            Matching rows, in the requested order
        """
        ...

    @abstractmethod
    async def create(self, table: EntityTable, fields: Mapping[str, Any]) -> Row:
        """
        Insert a single row.

        Returns:
            The stored row with id and timestamps assigned by the store
        """
        ...

    @abstractmethod
    async def update(
        self,
        table: EntityTable,
        record_id: str,
        fields: Mapping[str, Any],
    ) -> List[Row]:
        """
        Apply a partial update to the row with the given id.

        Returns:
            The affected rows. An empty list means nothing changed,
            either because the id does not exist or because a
            row-level policy filtered the write.
        """
        ...

    @abstractmethod
    async def delete(self, table: EntityTable, record_id: str) -> None:
        """Delete the row with the given id."""
        ...

    @abstractmethod
    async def current_caller(self) -> Optional[Identity]:
        """Return the identity requests are made as, or None if anonymous."""
        ...


class AuthProvider(ABC):
    """
    Abstract authentication provider.

    Raises AuthException when credentials are rejected or the
    provider is unreachable.
    """

    @abstractmethod
    async def get_session(self) -> Optional[Session]:
        """Return the current session, if any."""
        ...

    @abstractmethod
    async def get_user(self) -> Optional[Identity]:
        """Return the identity of the current session, if any."""
        ...

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> Session:
        """Sign in with email and password and keep the new session."""
        ...

    @abstractmethod
    async def sign_up(
        self,
        email: str,
        password: str,
        full_name: Optional[str] = None,
    ) -> Identity:
        """Register a new user."""
        ...

    @abstractmethod
    async def sign_out(self) -> None:
        """End the current session."""
        ...

    @abstractmethod
    async def fetch_user(self, access_token: str) -> Identity:
        """Validate an access token, adopt it as the session and return its user."""
        ...
