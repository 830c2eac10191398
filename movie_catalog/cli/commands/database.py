"""Database commands."""

from __future__ import annotations

import click

from movie_catalog.cli.utils import coro, error, success
from movie_catalog.infra.database import close_database, create_schema, init_database


@click.command(name="init-db")
@coro
async def init_db() -> None:
    """Check the connection and create missing tables."""
    try:
        await init_database()
        await create_schema()
    except Exception as e:
        error(f"Database initialization failed: {e}")
        raise SystemExit(1) from e
    finally:
        await close_database()
    success("Database schema is up to date")
