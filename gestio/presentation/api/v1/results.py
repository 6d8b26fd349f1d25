"""Translate repository outcomes into API errors."""

from typing import Optional, TypeVar

from gestio.application.dto import OperationResult
from gestio.application.repositories import ReadOnlyRepository
from gestio.domain.exceptions import (
    InvalidRecordException,
    NotFoundOrDeniedException,
    StoreError,
    StoreTimeoutError,
)

T = TypeVar("T")


def unwrap(result: OperationResult[T], entity: str, record_id: Optional[str] = None) -> Optional[T]:
    """
    Return the result data or raise the matching domain exception.

    A soft failure (nothing changed) becomes NotFoundOrDeniedException.
    """
    if result.is_soft_failure:
        raise NotFoundOrDeniedException(entity, record_id or "")
    if result.error is None:
        return result.data
    if result.code == "INVALID_RECORD":
        raise InvalidRecordException([result.error])
    if result.code == "STORE_TIMEOUT":
        raise StoreTimeoutError()
    raise StoreError(result.error)


async def listed(repository: ReadOnlyRepository[T]) -> list:
    """Run `list()` and raise StoreError if the fetch failed."""
    items = await repository.list()
    if repository.error is not None:
        raise StoreError(repository.error)
    return items
