"""Router registry and setup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter
from sqlalchemy import text

from movie_catalog.core.settings import get_app_settings
from movie_catalog.features.genres.router import router as genres_router
from movie_catalog.features.movies.router import router as movies_router
from movie_catalog.features.uploads.router import router as uploads_router
from movie_catalog.features.users.router import router as users_router
from movie_catalog.infra.database import get_async_session

if TYPE_CHECKING:
    from fastapi import FastAPI

    from movie_catalog.core.settings import AppSettings

logger = logging.getLogger(__name__)

health_router = APIRouter(tags=["health"])


@health_router.get("/health", summary="Health check")
async def health() -> dict[str, str]:
    """Liveness plus a database round trip."""
    database = "ok"
    try:
        async with get_async_session() as session:
            await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Health check database probe failed", extra={"error": str(e)})
        database = "unavailable"
    return {"status": "ok" if database == "ok" else "degraded", "database": database}


def setup_routers(app: FastAPI, app_settings: AppSettings | None = None) -> None:
    """Register all feature routers with the application."""
    app_settings = app_settings or get_app_settings()
    api_prefix = app_settings.api_prefix

    app.include_router(movies_router, prefix=api_prefix)
    app.include_router(genres_router, prefix=api_prefix)
    app.include_router(users_router, prefix=api_prefix)
    app.include_router(uploads_router, prefix=api_prefix)
    app.include_router(health_router, prefix=api_prefix)

    logger.debug("Routers registered", extra={"api_prefix": api_prefix})


__all__ = ["setup_routers"]
