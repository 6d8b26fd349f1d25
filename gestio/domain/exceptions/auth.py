"""Authentication-related domain exceptions."""

from .base import DomainException


class AuthException(DomainException):
    """Raised when the authentication provider rejects a request."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            message=message,
            code="AUTH_ERROR",
        )
        self.status_code = status_code


class NotAuthenticatedException(AuthException):
    """Raised when an operation requires a signed-in caller."""

    def __init__(self):
        super().__init__(message="Authentication required")
        self.code = "NOT_AUTHENTICATED"
