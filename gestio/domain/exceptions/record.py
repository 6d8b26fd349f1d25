"""Record validation exceptions."""

from typing import List

from .base import DomainException


class InvalidRecordException(DomainException):
    """Raised when record fields fail client-side validation."""

    def __init__(self, errors: List[str]):
        super().__init__(
            message="; ".join(errors),
            code="INVALID_RECORD",
        )
        self.errors = errors
