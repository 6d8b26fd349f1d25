"""Per-request id, shared with structlog and error responses."""

import uuid
from contextvars import ContextVar
from typing import Optional

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

# Checked in order
INCOMING_HEADERS = ("X-Request-ID", "X-Correlation-ID")
RESPONSE_HEADER = "X-Request-ID"


def get_request_id() -> Optional[str]:
    return request_id_var.get()


def _incoming_request_id(request: Request) -> Optional[str]:
    for header in INCOMING_HEADERS:
        value = request.headers.get(header, "").strip()
        if value:
            return value[:128]
    return None


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Reuses the caller's request id or creates one.

    The id is bound to every structlog event logged while the request is
    handled, included in error bodies and echoed in the response headers.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = _incoming_request_id(request) or uuid.uuid4().hex
        request.state.request_id = request_id

        token = request_id_var.set(request_id)
        structlog.contextvars.bind_contextvars(request_id=request_id)
        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars("request_id")
            request_id_var.reset(token)

        response.headers[RESPONSE_HEADER] = request_id
        return response
