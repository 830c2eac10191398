"""Service layer for the genres feature."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from movie_catalog.core.exceptions import ConflictException, NotFoundException
from movie_catalog.features.genres.models import Genre
from movie_catalog.features.genres.repository import GenreRepository, get_genre_repository

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from sqlalchemy.ext.asyncio import AsyncSession

    from movie_catalog.features.genres.schemas import GenreCreate

logger = logging.getLogger(__name__)


class GenreService:
    """Genre lookups used by the API and by movie writes."""

    def __init__(
        self,
        session: AsyncSession,
        repo: GenreRepository | None = None,
    ) -> None:
        self._session = session
        self._repo = repo or get_genre_repository()

    async def list_genres(self) -> Sequence[Genre]:
        return await self._repo.list_all(self._session)

    async def find_by_name(self, name: str) -> Genre | None:
        return await self._repo.find_by_name(self._session, name)

    async def find_by_ids(self, genre_ids: Iterable[int]) -> list[Genre]:
        """Resolve every id in ``genre_ids`` to a genre.

        Raises:
            NotFoundException: If any id does not exist
        """
        requested = list(dict.fromkeys(genre_ids))
        genres = list(await self._repo.find_by_ids(self._session, requested))

        missing = sorted(set(requested) - {genre.id for genre in genres})
        if missing:
            raise NotFoundException(
                detail=f"Genres not found: {', '.join(map(str, missing))}",
                type="genre-not-found",
                extra={"genre_ids": missing},
            )
        return genres

    async def create_genre(self, payload: GenreCreate) -> Genre:
        """Create a genre.

        Raises:
            ConflictException: If a genre with the same name (any case) exists
        """
        existing = await self._repo.find_by_name(self._session, payload.name)
        if existing is not None:
            raise ConflictException(
                detail=f"Genre with name '{payload.name}' already exists",
                type="genre-name-exists",
                extra={"name": payload.name},
            )

        created = await self._repo.create(self._session, Genre(name=payload.name))
        logger.info("Genre created", extra={"genre_id": created.id, "genre_name": created.name})
        return created
