"""Record store domain exceptions."""

from .base import DomainException


class StoreError(DomainException):
    """Raised when the record store rejects or fails a request."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            message=message,
            code="STORE_ERROR",
        )
        self.status_code = status_code


class StoreTimeoutError(StoreError):
    """Raised when a record store request times out."""

    def __init__(self):
        super().__init__(
            message="Record store request timed out",
            status_code=None,
        )
        self.code = "STORE_TIMEOUT"


class NotFoundOrDeniedException(DomainException):
    """
    Raised when a mutation affected zero rows.

    The store cannot tell a missing id from a row hidden by a
    row-level security policy, so both surface the same way.
    """

    def __init__(self, entity: str, record_id: str):
        super().__init__(
            message=f"No {entity} changed: {record_id} not found or not permitted",
            code="NOT_FOUND_OR_DENIED",
        )
        self.entity = entity
        self.record_id = record_id
