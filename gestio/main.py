"""
Gestio - Main Application Entry Point

Business management dashboard core: finance, budgets, logistics and
reporting over a hosted record store.

Run with `uvicorn gestio.main:app`.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from gestio import __version__
from gestio.core.config import settings
from gestio.core.logging import setup_logging
from gestio.core.metrics import get_metrics, get_metrics_content_type
from gestio.infrastructure.database import db_manager
from gestio.presentation.api import api_router
from gestio.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Configure logging and, for the SQL backend, the connection pool.

    With the default REST backend nothing is opened here: every request
    talks to the hosted store with its own HTTP client.
    """
    setup_logging()
    if settings.store_backend == "sql":
        db_manager.init()

    logger.info(
        "application_started",
        version=__version__,
        store_backend=settings.store_backend,
        store_url=settings.supabase_url if settings.store_backend == "rest" else None,
    )

    yield

    await db_manager.close()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Gestio",
        description="Business dashboard: transactions, budgets, logistics and reports",
        version=__version__,
        lifespan=lifespan,
    )

    # The dashboard front end calls the API from the browser
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestContextMiddleware)

    error_handler_middleware(app)
    app.include_router(api_router)

    @app.get("/metrics", include_in_schema=False)
    async def metrics() -> Response:
        return Response(content=get_metrics(), media_type=get_metrics_content_type())

    @app.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse(url="/docs")

    return app


app = create_app()
