"""
NutriTrack FastAPI Application
Main entry point: logging, storage startup sequence, middleware and routes
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio

from api.routes import allergens, meal_planner, profiles, food_log, uploads, health
from adapters import mongo_adapter
from app.config import settings
from api.middleware import (
    RequestLoggingMiddleware,
    app_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    general_exception_handler,
)
from app.exceptions import AppError

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("nutritrack.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.

    Connects to MongoDB and creates the unique profile email index before any
    request is served. Either step failing aborts startup and the process
    exits with a non-zero status; there is no retry.
    """
    _logger.info(f"Starting NutriTrack in {settings.environment.value} mode")
    app.state.mongo = None

    try:
        # Blocking driver calls run in a worker thread to keep the loop free
        adapter = await anyio.to_thread.run_sync(
            mongo_adapter.connect,
            settings.mongo_uri,
            settings.mongo_db_name,
            settings.mongo_server_selection_timeout_ms,
        )
    except Exception:
        _logger.exception("Failed to connect to MongoDB; shutting down")
        raise

    app.state.mongo = adapter
    _logger.info("Storage ready, accepting requests")

    try:
        yield
    finally:
        _logger.info("Shutting down NutriTrack")
        app.state.mongo = None
        try:
            adapter.close()
        except Exception as e:
            _logger.exception("Error closing MongoDB adapter during shutdown: %s", e)


# Create FastAPI application
app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url=(
        f"{settings.api_prefix}/openapi.json" if not settings.is_production() else None
    ),
    docs_url=f"{settings.api_prefix}/docs" if not settings.is_production() else None,
    redoc_url=f"{settings.api_prefix}/redoc" if not settings.is_production() else None,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add request logging middleware
app.add_middleware(RequestLoggingMiddleware)

# Register exception handlers
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(AppError, app_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(health.router, prefix=settings.api_prefix)
app.include_router(allergens.router, prefix=settings.api_prefix)
app.include_router(meal_planner.router, prefix=settings.api_prefix)
app.include_router(profiles.router, prefix=settings.api_prefix)
app.include_router(food_log.router, prefix=settings.api_prefix)
app.include_router(uploads.router, prefix=settings.api_prefix)


def run():
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
