"""Domain Exceptions - Store failures and validation errors."""

from .base import DomainException
from .auth import AuthException, NotAuthenticatedException
from .record import InvalidRecordException
from .store import NotFoundOrDeniedException, StoreError, StoreTimeoutError

__all__ = [
    "DomainException",
    "AuthException",
    "NotAuthenticatedException",
    "InvalidRecordException",
    "NotFoundOrDeniedException",
    "StoreError",
    "StoreTimeoutError",
]
