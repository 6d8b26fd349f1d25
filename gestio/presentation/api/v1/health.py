"""Liveness endpoint."""

from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

from gestio import __version__
from gestio.core.config import settings
from gestio.infrastructure.database import db_manager

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    version: str
    store_backend: Literal["rest", "sql"]
    # Only meaningful for the sql backend
    database_ready: bool | None = None


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Reports the running version and which record store backend is configured. "
    "Does not call the store.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        version=__version__,
        store_backend=settings.store_backend,
        database_ready=db_manager.initialized if settings.store_backend == "sql" else None,
    )
