"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from gestio.domain.exceptions import (
    AuthException,
    DomainException,
    InvalidRecordException,
    NotFoundOrDeniedException,
    StoreError,
    StoreTimeoutError,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": code,
            "message": message,
            "request_id": get_request_id(),
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(NotFoundOrDeniedException)
    async def not_found_or_denied_handler(
        request: Request,
        exc: NotFoundOrDeniedException,
    ) -> JSONResponse:
        """Handle mutations that changed no row."""
        return _error_response(404, exc.code, exc.message)

    @app.exception_handler(InvalidRecordException)
    async def invalid_record_handler(
        request: Request,
        exc: InvalidRecordException,
    ) -> JSONResponse:
        """Handle client-side validation errors."""
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(AuthException)
    async def auth_error_handler(
        request: Request,
        exc: AuthException,
    ) -> JSONResponse:
        """Handle rejected or missing credentials."""
        logger.info(
            "auth_rejected",
            request_id=get_request_id(),
            code=exc.code,
            status_code=exc.status_code,
        )
        return _error_response(401, exc.code, exc.message)

    @app.exception_handler(StoreTimeoutError)
    async def store_timeout_handler(
        request: Request,
        exc: StoreTimeoutError,
    ) -> JSONResponse:
        """Handle record store timeouts."""
        logger.error(
            "store_timeout",
            request_id=get_request_id(),
        )
        return _error_response(
            504,
            exc.code,
            "Record store did not answer in time. Please try again.",
        )

    @app.exception_handler(StoreError)
    async def store_error_handler(
        request: Request,
        exc: StoreError,
    ) -> JSONResponse:
        """Handle record store errors."""
        logger.error(
            "store_error",
            request_id=get_request_id(),
            message=exc.message,
            status_code=exc.status_code,
        )
        return _error_response(502, exc.code, exc.message)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred.")
