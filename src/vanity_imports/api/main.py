"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI

from vanity_imports import __version__
from vanity_imports.api.routers import admin, vanity
from vanity_imports.config import Settings, get_settings
from vanity_imports.config.logging import configure_logging
from vanity_imports.services.config_store import ConfigStore

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    configure_logging(
        log_level=settings.log_level,
        json_logs=settings.is_production,
    )

    # Load the config before accepting traffic
    store: ConfigStore = app.state.config_store
    if not store.is_loaded:
        await store.initialize()
    logger.info("Serving vanity imports", source=store.source)

    yield


def create_app(settings: Settings | None = None, store: ConfigStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Vanity Imports",
        description="Go vanity import path server",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.config_store = store or ConfigStore(
        settings.config_url,
        timeout=settings.fetch_timeout,
    )

    # Include routers; the vanity catch-all goes last
    if settings.admin_reload_enabled:
        app.include_router(admin.router, tags=["Admin"])
    app.include_router(vanity.router, tags=["Vanity"])

    return app


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "vanity_imports.api.main:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        workers=settings.api_workers,
        reload=settings.debug and settings.is_development,
    )


if __name__ == "__main__":
    run()
