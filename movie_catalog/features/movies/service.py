"""Service layer for the movies feature.

Mutations go through ``authorize_mutation`` before anything is written or
any stored media is touched; the router commits once per request.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from movie_catalog.core.database.exceptions import NotFoundError
from movie_catalog.core.exceptions import (
    ForbiddenException,
    NotFoundException,
    ValidationException,
)
from movie_catalog.core.settings import get_pagination_settings
from movie_catalog.features.genres.service import GenreService
from movie_catalog.features.movies.models import Movie
from movie_catalog.features.movies.notifications import ReleaseNotifier
from movie_catalog.features.movies.ownership import Denied, authorize_mutation
from movie_catalog.features.movies.repository import MovieRepository, get_movie_repository
from movie_catalog.features.users.repository import UserRepository, get_user_repository
from movie_catalog.infra.storage import StorageError, get_storage_backend

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from movie_catalog.core.pagination import Connection
    from movie_catalog.core.settings import PaginationSettings
    from movie_catalog.features.movies.schemas import (
        MovieCreate,
        MovieFilters,
        MoviePagination,
        MovieUpdate,
    )
    from movie_catalog.infra.storage import StorageBackend

logger = logging.getLogger(__name__)


def derive_profit(budget: int | None, revenue: int | None) -> int | None:
    """``revenue - budget``, floored at zero; None unless both are known."""
    if budget is None or revenue is None:
        return None
    return max(revenue - budget, 0)


class MovieService:
    """Movie listing, retrieval and owner-only mutations.

    Example:
        service = MovieService(session)
        movie = await service.create_movie(payload, acting_user_id=user.user_id)
        await session.commit()
    """

    def __init__(
        self,
        session: AsyncSession,
        repository: MovieRepository | None = None,
        genres: GenreService | None = None,
        storage: StorageBackend | None = None,
        notifier: ReleaseNotifier | None = None,
        users: UserRepository | None = None,
        pagination_settings: PaginationSettings | None = None,
    ) -> None:
        self._session = session
        self._repo = repository or get_movie_repository()
        self._genres = genres or GenreService(session)
        self._storage = storage or get_storage_backend()
        self._notifier = notifier or ReleaseNotifier(session)
        self._users = users or get_user_repository()
        self._pagination = pagination_settings or get_pagination_settings()

    async def list_movies(
        self,
        filters: MovieFilters | None = None,
        pagination: MoviePagination | None = None,
        owner_id: int | None = None,
    ) -> Connection[Movie]:
        """One page of movies matching ``filters``.

        Raises:
            ValidationException: If ``first`` exceeds the configured maximum
        """
        first = pagination.first if pagination is not None else None
        if first is not None and first > self._pagination.max_page_size:
            raise ValidationException(
                detail=f"first must be at most {self._pagination.max_page_size}",
                type="page-size-too-large",
                extra={"first": first, "max": self._pagination.max_page_size},
            )

        return await self._repo.list_movies(
            self._session,
            filters,
            pagination,
            owner_id=owner_id,
            default_page_size=self._pagination.default_page_size,
        )

    async def get_movie(self, movie_id: int) -> Movie:
        """Fetch a movie.

        Raises:
            NotFoundException: If the movie doesn't exist
        """
        try:
            return await self._repo.get_or_raise(self._session, movie_id)
        except NotFoundError as e:
            raise NotFoundException(
                detail=f"Movie {movie_id} not found",
                type="movie-not-found",
                extra={"movie_id": movie_id},
            ) from e

    async def create_movie(self, data: MovieCreate, acting_user_id: int) -> Movie:
        """Create a movie owned by ``acting_user_id``.

        Raises:
            NotFoundException: If the user or any genre id doesn't exist
        """
        if await self._users.get(self._session, acting_user_id) is None:
            raise NotFoundException(
                detail=f"User {acting_user_id} not found",
                type="user-not-found",
                extra={"user_id": acting_user_id},
            )

        genres = await self._genres.find_by_ids(data.genre_ids) if data.genre_ids else []

        movie = Movie(
            **data.model_dump(exclude={"genre_ids"}),
            profit=derive_profit(data.budget, data.revenue),
            created_by_id=acting_user_id,
            genres=genres,
        )
        movie = await self._repo.create(self._session, movie)
        await self._notifier.schedule(movie)

        logger.info(
            "Movie created",
            extra={"movie_id": movie.id, "movie_title": movie.title, "user_id": acting_user_id},
        )
        return movie

    async def update_movie(self, movie_id: int, data: MovieUpdate, acting_user_id: int) -> Movie:
        """Apply the fields set in ``data``.

        Raises:
            NotFoundException: If the movie or a genre id doesn't exist
            ForbiddenException: If ``acting_user_id`` doesn't own the movie
        """
        movie = await self.get_movie(movie_id)
        self._ensure_owner(movie, acting_user_id)

        changes = data.model_dump(exclude_unset=True, exclude={"genre_ids"})
        if data.genre_ids is not None:
            movie.genres = await self._genres.find_by_ids(data.genre_ids)
        for field, value in changes.items():
            setattr(movie, field, value)
        movie.profit = derive_profit(movie.budget, movie.revenue)

        movie = await self._repo.update(self._session, movie)
        logger.info(
            "Movie updated",
            extra={"movie_id": movie.id, "fields": sorted(changes), "user_id": acting_user_id},
        )
        return movie

    async def delete_movie(self, movie_id: int, acting_user_id: int) -> bool:
        """Delete a movie and, best effort, its stored media.

        The deletion is committed before any media is removed, so a failed
        commit leaves the poster and backdrop in place.

        Raises:
            NotFoundException: If the movie doesn't exist
            ForbiddenException: If ``acting_user_id`` doesn't own the movie
        """
        movie = await self.get_movie(movie_id)
        self._ensure_owner(movie, acting_user_id)

        media_keys = movie.media_keys
        await self._repo.delete(self._session, movie)
        await self._session.commit()
        await self._delete_media(movie_id, media_keys)

        logger.info("Movie deleted", extra={"movie_id": movie_id, "user_id": acting_user_id})
        return True

    def _ensure_owner(self, movie: Movie, acting_user_id: int) -> None:
        decision = authorize_mutation(movie, acting_user_id)
        if isinstance(decision, Denied):
            logger.warning(
                "Movie mutation denied",
                extra={
                    "movie_id": movie.id,
                    "owner_id": movie.created_by_id,
                    "user_id": acting_user_id,
                },
            )
            raise ForbiddenException(
                detail=decision.reason,
                type="movie-not-owner",
                extra={"movie_id": movie.id},
            )

    async def _delete_media(self, movie_id: int, keys: list[str]) -> None:
        if not keys:
            return
        if self._storage is None:
            logger.info(
                "Storage disabled, leaving movie media in place",
                extra={"movie_id": movie_id, "keys": keys},
            )
            return

        for key in keys:
            try:
                await self._storage.delete_object(key)
            except StorageError as e:
                logger.warning(
                    "Failed to delete movie media",
                    extra={"movie_id": movie_id, "key": key, "error": str(e)},
                )


__all__ = ["MovieService", "derive_profit"]
