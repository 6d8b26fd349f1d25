"""External API client implementations."""

from .auth_client import HttpAuthProvider
from .record_store_client import HttpRecordStoreClient

__all__ = [
    "HttpAuthProvider",
    "HttpRecordStoreClient",
]
