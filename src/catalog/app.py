"""FastAPI application factory and lifespan management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from catalog.config import Settings
from catalog.middleware.auth import APIKeyMiddleware
from catalog.middleware.cors import configure_cors
from catalog.middleware.logging import RequestLoggingMiddleware
from catalog.records import SAMPLE_RECORDS, RecordStore
from catalog.routes import health, items, search

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and shutdown of the service.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application runtime.
    """
    settings: Settings = app.state.settings
    store: RecordStore = app.state.record_store
    logger.info("api_startup", host=settings.host, port=settings.port)
    logger.info("catalog_ready", record_count=len(store))

    try:
        yield
    finally:
        logger.info("api_shutdown")


def create_app(
    settings: Settings | None = None,
    store: RecordStore | None = None,
) -> FastAPI:
    """Factory function to create configured FastAPI application.

    Args:
        settings: Configuration instance. Creates default if None.
        store: Record repository. When None, a new store is created and
            seeded with sample records if settings allow it.

    Returns:
        Configured FastAPI application.

    Raises:
        InvalidConfiguration: If the search tuning or page size settings
            are invalid.
    """
    if settings is None:
        settings = Settings()

    search_options = settings.search_options()
    settings.check_page_sizes()

    if store is None:
        store = RecordStore(SAMPLE_RECORDS if settings.seed_sample_data else ())

    app = FastAPI(
        title="Catalog Search API",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/api/v1/docs" if settings.debug else None,
        redoc_url=None,
        openapi_url="/api/v1/openapi.json" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.search_options = search_options
    app.state.record_store = store

    configure_cors(app, settings.cors_origins)
    app.add_middleware(RequestLoggingMiddleware)
    if settings.key:
        app.add_middleware(
            APIKeyMiddleware,
            api_key=settings.key,
            protect_reads=settings.auth_protect_reads,
        )

    app.include_router(health.router, prefix="/api/v1")
    app.include_router(items.router, prefix="/api/v1")
    app.include_router(search.router, prefix="/api/v1")

    return app
