"""Result shape returned by every repository mutation."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

NO_DATA_CHANGED = "No data changed"


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """
    Outcome of a repository call.

    Exactly one of three shapes:
    - success: `error` is None and `warning` is None
    - soft failure: `error` is None, `data` is None and `warning` is set
      (the store accepted the call but no row changed)
    - failure: `error` holds a human-readable message and `code` the
      domain error code it came from
    """

    data: Optional[T] = None
    error: Optional[str] = None
    code: Optional[str] = None
    warning: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_soft_failure(self) -> bool:
        return self.error is None and self.warning is not None

    @classmethod
    def success(cls, data: Optional[T] = None) -> "OperationResult[T]":
        return cls(data=data)

    @classmethod
    def failure(cls, message: str, code: str = "STORE_ERROR") -> "OperationResult[T]":
        return cls(error=message, code=code)

    @classmethod
    def no_change(cls, message: str = NO_DATA_CHANGED) -> "OperationResult[T]":
        return cls(warning=message)
