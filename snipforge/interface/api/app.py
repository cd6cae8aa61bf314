"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from snipforge.config import Settings
from snipforge.interface.api.routes import health, snippets, tags, transfer
from snipforge.util.di.container import create_container, setup_di
from snipforge.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        container: DI container, defaults to the production container
    """
    settings = Settings()

    app_instance = FastAPI(
        title="SnipForge API",
        description="Snippet manager: search, tagging and variable substitution for reusable commands",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        expose_headers=["Content-Length", "Content-Type", "Content-Disposition"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(snippets.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(transfer.router)

    return app_instance
