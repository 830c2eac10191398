"""Repository for the genres feature."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import func, select

from movie_catalog.core.database.filters import CollectionFilter
from movie_catalog.core.database.repository import BaseRepository
from movie_catalog.features.genres.models import Genre

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from sqlalchemy.ext.asyncio import AsyncSession


class GenreRepository(BaseRepository[Genre]):
    """Repository for Genre model.

    Feature-specific lookups by id set and by name on top of
    ``BaseRepository`` CRUD.
    """

    def __init__(self) -> None:
        super().__init__(Genre)

    async def find_by_ids(
        self,
        session: AsyncSession,
        genre_ids: Iterable[int],
    ) -> Sequence[Genre]:
        """Fetch the genres whose ids are in ``genre_ids``.

        Unknown ids are skipped; compare lengths to detect them.
        """
        ids = list(dict.fromkeys(genre_ids))
        if not ids:
            return []

        stmt = CollectionFilter(Genre.id, ids).apply(select(Genre).order_by(Genre.name))
        result = await session.execute(stmt)
        items = result.scalars().all()

        self._lazy.debug(lambda: f"db.find_by_ids({len(ids)} ids) -> {len(items)} found")
        return items

    async def find_by_name(self, session: AsyncSession, name: str) -> Genre | None:
        """Case-insensitive lookup by name."""
        stmt = select(Genre).where(func.lower(Genre.name) == name.strip().lower())
        result = await session.execute(stmt)
        genre = result.scalar_one_or_none()

        self._lazy.debug(lambda: f"db.find_by_name({name!r}) -> {genre is not None}")
        return genre

    async def list_all(self, session: AsyncSession) -> Sequence[Genre]:
        return await self.list(session, order_by=Genre.name)


_genre_repository: GenreRepository | None = None


def get_genre_repository() -> GenreRepository:
    """Get the shared GenreRepository instance."""
    global _genre_repository
    if _genre_repository is None:
        _genre_repository = GenreRepository()
    return _genre_repository
