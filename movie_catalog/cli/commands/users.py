"""User commands."""

from __future__ import annotations

import click

from movie_catalog.cli.utils import coro, error, success
from movie_catalog.core.exceptions import ConflictException
from movie_catalog.features.users.schemas import UserCreate
from movie_catalog.features.users.service import UserService
from movie_catalog.infra.database import close_database, get_async_session


@click.command(name="create-user")
@click.option("--name", required=True, help="Display name")
@click.option("--email", required=True, help="Email address, unique")
@coro
async def create_user(name: str, email: str) -> None:
    """Register a user known to the identity service."""
    try:
        async with get_async_session() as session:
            user = await UserService(session).create_user(UserCreate(name=name, email=email))
            await session.commit()
    except ConflictException as e:
        error(e.detail)
        raise SystemExit(1) from e
    finally:
        await close_database()
    success(f"Created user {user.id} <{user.email}>")
