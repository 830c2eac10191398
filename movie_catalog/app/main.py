"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from movie_catalog.app.exception_handlers import configure_exception_handlers
from movie_catalog.app.lifespan import lifespan
from movie_catalog.app.middleware import configure_middleware
from movie_catalog.app.router import setup_routers
from movie_catalog.core.settings import get_app_settings


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app_settings = get_app_settings()

    app = FastAPI(
        title=app_settings.title,
        description=app_settings.description,
        version=app_settings.version,
        docs_url=app_settings.get_docs_url(),
        redoc_url=None,
        openapi_url=app_settings.get_openapi_url(),
        debug=app_settings.debug,
        lifespan=lifespan,
    )

    configure_exception_handlers(app)
    configure_middleware(app, app_settings)
    setup_routers(app, app_settings)

    return app
