"""Application lifespan: startup and shutdown of shared resources."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from movie_catalog.core.settings import (
    get_app_settings,
    get_logging_settings,
    get_storage_settings,
)
from movie_catalog.infra.database import close_database, create_schema, init_database
from movie_catalog.infra.logging import setup_logging, shutdown
from movie_catalog.infra.storage import StorageError, start_storage, stop_storage

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

logger = logging.getLogger(__name__)


async def _startup_core() -> None:
    app = get_app_settings()
    setup_logging(get_logging_settings(), service_name=app.service_name, force=True)
    logger.info(
        "Application starting",
        extra={"service": app.service_name, "environment": app.environment},
    )


async def _startup_database() -> None:
    await init_database()
    if get_app_settings().create_schema_on_startup:
        await create_schema()


async def _startup_storage() -> None:
    """Start object storage; a failure leaves media features unavailable."""
    settings = get_storage_settings()
    if not settings.is_configured:
        logger.info("Object storage disabled")
        return

    try:
        await start_storage()
        logger.info(
            "Storage service initialized",
            extra={"bucket": settings.bucket, "endpoint": settings.endpoint},
        )
    except StorageError as e:
        logger.warning(
            "Storage service unavailable, continuing in degraded mode",
            extra={"error": str(e)},
        )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifecycle.

    Startup order: logging, database, storage. Shutdown runs in reverse.
    """
    _ = app

    await _startup_core()
    await _startup_database()
    await _startup_storage()

    yield

    logger.info("Application shutting down")
    await stop_storage()
    await close_database()
    shutdown()


__all__ = ["lifespan"]
