"""Error body returned by every failing endpoint."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """
    `error` is one of NOT_AUTHENTICATED, AUTH_ERROR, INVALID_RECORD,
    NOT_FOUND_OR_DENIED, STORE_ERROR, STORE_TIMEOUT or INTERNAL_ERROR.
    """

    error: str = Field(..., examples=["NOT_FOUND_OR_DENIED"])
    message: str = Field(
        ...,
        examples=["No budget changed: 550e8400-e29b-41d4-a716-446655440000 not found or not permitted"],
    )
    request_id: str | None = Field(None, description="Echoes the X-Request-ID response header")
