"""Database engine and session management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from movie_catalog.core.settings import get_db_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)

db_settings = get_db_settings()

engine = create_async_engine(db_settings.url, **db_settings.engine_kwargs())

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


if db_settings.is_sqlite:

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_conn, connection_record) -> None:  # noqa: ANN001
        # ON DELETE CASCADE is ignored by SQLite unless enabled per connection
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """Yield a session, rolling back if the block raises.

    Example:
        async with get_async_session() as session:
            movie = await session.get(Movie, 7)
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_database() -> None:
    """Verify the database is reachable.

    Raises:
        sqlalchemy.exc.OperationalError: If the connection fails.
    """
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.error("Failed to connect to database", extra={"error": str(e)})
        raise
    logger.info("Database connection established")


async def create_schema() -> None:
    """Create any missing tables for the registered models."""
    from movie_catalog.core.database import Base
    from movie_catalog.features.genres import models as _genres  # noqa: F401
    from movie_catalog.features.movies import models as _movies  # noqa: F401
    from movie_catalog.features.users import models as _users  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema created", extra={"tables": sorted(Base.metadata.tables)})


async def close_database() -> None:
    """Dispose the engine's connection pool."""
    logger.info("Closing database connection")
    await engine.dispose()


__all__ = [
    "AsyncSessionLocal",
    "close_database",
    "create_schema",
    "engine",
    "get_async_session",
    "init_database",
]
