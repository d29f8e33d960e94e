"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures exception handlers, static files, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from psycopg_pool import ConnectionPool

from kitchensink.adapters.repository import (
    InMemoryMemberRepository,
    PostgresMemberRepository,
    run_migrations,
)
from kitchensink.api.rest import router as rest_router
from kitchensink.config.logging import configure_logging
from kitchensink.config.settings import get_settings

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent.parent / "static"

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "members",
        "description": "Member registration - register, list and look up members",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates the member repository for the configured backend
    - For postgres: opens the connection pool and runs migrations
    - Closes the connection pool on shutdown
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info("Starting application...")

    pool = None
    if settings.store_backend == "memory":
        logger.info("Using in-memory member store")
        app.state.repository = InMemoryMemberRepository()
    else:
        logger.info("Connecting to database...")
        pool = ConnectionPool(
            conninfo=settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
        )

        logger.info("Running database migrations...")
        run_migrations(pool)

        app.state.repository = PostgresMemberRepository(pool)
    app.state.pool = pool

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    if pool is not None:
        pool.close()
        logger.info("Database connection pool closed")


app = FastAPI(
    title="kitchensink",
    description="Member Registration API - Register members and list them by name",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.include_router(rest_router, prefix="/rest")
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Report unreadable request bodies in the same shape as field errors.

    Each error is keyed by the last field name in its location
    (e.g. "phoneNumber", or "body" for non-JSON payloads).
    """
    errors: dict[str, str] = {}
    for error in exc.errors():
        location = error.get("loc", ())
        field = next((part for part in reversed(location) if isinstance(part, str)), "body")
        errors[field] = error.get("msg", "Invalid value")
    logger.warning("Malformed request to %s: %s", request.url.path, errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors)


@app.get("/", include_in_schema=False)
async def index() -> FileResponse:
    """Serve the registration page."""
    return FileResponse(STATIC_DIR / "index.html")


@app.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with database validation.

    Returns 200 OK if application and database are healthy.
    Raises exception if database connection fails.
    """
    pool = getattr(request.app.state, "pool", None)
    if pool is not None:
        with pool.connection() as conn:
            conn.execute("SELECT 1")

    return {"status": "healthy"}
