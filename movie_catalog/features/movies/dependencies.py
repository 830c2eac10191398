"""FastAPI dependencies for the movies feature."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.core.dependencies.database import get_db_session
from movie_catalog.core.dependencies.storage import OptionalStorageDep
from movie_catalog.features.movies.service import MovieService


async def get_movie_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
    storage: OptionalStorageDep,
) -> MovieService:
    """Service bound to the request's session.

    Routes that also depend on ``get_db_session`` receive the same session.
    """
    return MovieService(session, storage=storage)


MovieServiceDep = Annotated[MovieService, Depends(get_movie_service)]

__all__ = ["MovieServiceDep", "get_movie_service"]
