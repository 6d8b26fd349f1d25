"""Access logging and HTTP metrics middleware."""

import time
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from gestio.core.config import settings
from gestio.core.metrics import record_http_request

logger = structlog.get_logger(__name__)

# Polled by probes and scrapers; logged at debug only
QUIET_PATHS = frozenset({"/health", "/metrics"})


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs one event per request with its outcome and duration.

    The request id is already bound to the structlog context by
    RequestContextMiddleware, so it is not repeated here.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        path = request.url.path
        log = logger.bind(method=request.method, path=path)
        emit = log.debug if path in QUIET_PATHS else log.info

        try:
            response = await call_next(request)
        except Exception as e:
            elapsed = time.perf_counter() - started
            log.error(
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=round(elapsed * 1000, 2),
            )
            self._observe(request, 500, elapsed)
            raise

        elapsed = time.perf_counter() - started
        emit(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round(elapsed * 1000, 2),
        )
        self._observe(request, response.status_code, elapsed)
        return response

    @staticmethod
    def _observe(request: Request, status: int, elapsed: float) -> None:
        if settings.metrics_enabled:
            record_http_request(request.method, _endpoint(request), status, elapsed)


def _endpoint(request: Request) -> str:
    # Route template keeps label cardinality bounded
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"
