"""Async SQLAlchemy engine and sessions."""

from movie_catalog.infra.database.session import (
    AsyncSessionLocal,
    close_database,
    create_schema,
    engine,
    get_async_session,
    init_database,
)

__all__ = [
    "AsyncSessionLocal",
    "close_database",
    "create_schema",
    "engine",
    "get_async_session",
    "init_database",
]
