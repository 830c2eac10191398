"""Repository for the movies feature.

Holds the listing engine: predicates from ``compile_filters`` are turned
into statement filters here, counted once for ``total_count`` and then
paged with a keyset filter from ``ordering``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from movie_catalog.core.database.exceptions import InvalidFilterError
from movie_catalog.core.database.filters import (
    EqualsFilter,
    FilterGroup,
    OnBeforeAfter,
    RangeFilter,
    RelatedCollectionFilter,
    SearchFilter,
    StatementFilter,
)
from movie_catalog.core.database.repository import BaseRepository
from movie_catalog.core.pagination import CursorCodec
from movie_catalog.features.genres.models import Genre
from movie_catalog.features.movies.models import Movie, PendingNotification
from movie_catalog.features.movies.ordering import DEFAULT_ORDER, bound_after, keyset_for
from movie_catalog.features.movies.predicates import (
    DateRange,
    Equals,
    InSet,
    RangeBound,
    SearchContains,
    TextContains,
    compile_filters,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date

    from sqlalchemy import Select
    from sqlalchemy.ext.asyncio import AsyncSession

    from movie_catalog.core.pagination import Connection, KeysetBound
    from movie_catalog.features.movies.ordering import MovieOrder
    from movie_catalog.features.movies.predicates import Predicate
    from movie_catalog.features.movies.schemas import MovieFilters, MoviePagination


def _column(name: str):  # noqa: ANN202
    column = getattr(Movie, name, None)
    if column is None:
        raise InvalidFilterError(f"Movie has no field '{name}'", filter_name=name)
    return column


def to_statement_filter(predicate: Predicate) -> StatementFilter:
    """Translate one predicate into the statement filter that applies it."""
    match predicate:
        case SearchContains(term=term, fields=fields):
            return SearchFilter([_column(name) for name in fields], term)
        case RangeBound(field=field, minimum=minimum, maximum=maximum):
            return RangeFilter(_column(field), minimum=minimum, maximum=maximum)
        case DateRange(field=field, start=start, end=end):
            return OnBeforeAfter(_column(field), on_or_after=start, on_or_before=end)
        case InSet(field="genre_ids", values=values):
            return RelatedCollectionFilter(Movie.genres, Genre.id, values)
        case Equals(field=field, value=value):
            return EqualsFilter(_column(field), value)
        case TextContains(field=field, term=term):
            return SearchFilter(_column(field), term)
    raise InvalidFilterError(
        f"Unsupported predicate {predicate!r}",
        filter_name=type(predicate).__name__,
    )


class MovieRepository(BaseRepository[Movie]):
    """Repository for Movie model.

    Adds filtered counting, keyset paging and the release notification
    queries to ``BaseRepository`` CRUD.
    """

    def __init__(self) -> None:
        super().__init__(Movie)

    def _filtered(self, predicates: Sequence[Predicate]) -> Select[tuple[Movie]]:
        group = FilterGroup([to_statement_filter(p) for p in predicates])
        return group.apply(select(Movie))

    async def count_matching(
        self,
        session: AsyncSession,
        predicates: Sequence[Predicate],
    ) -> int:
        """Number of movies satisfying every predicate."""
        total = await self.count(session, self._filtered(predicates))
        self._lazy.debug(lambda: f"db.count_matching({len(predicates)} predicates) -> {total}")
        return total

    async def find_matching(
        self,
        session: AsyncSession,
        predicates: Sequence[Predicate],
        *,
        order: MovieOrder | None = None,
        limit: int = 10,
        bound: KeysetBound | None = None,
    ) -> Sequence[Movie]:
        """Up to ``limit`` matching movies in ``order``, after ``bound``."""
        keyset = keyset_for(order, limit=limit, bound=bound)
        result = await session.execute(keyset.apply(self._filtered(predicates)))
        return result.scalars().all()[:limit]

    async def resolve_bound(
        self,
        session: AsyncSession,
        after: str | None,
        order: MovieOrder | None,
    ) -> KeysetBound | None:
        """Seek position just past the movie named by ``after``.

        Cursors that do not parse or name a deleted movie resolve to None,
        which restarts the listing from the top.
        """
        movie_id = CursorCodec.decode(after)
        if movie_id is None:
            if after:
                self._logger.info("Ignoring malformed cursor", extra={"cursor": after})
            return None

        movie = await session.get(Movie, movie_id)
        if movie is None:
            self._logger.info(
                "Ignoring cursor for missing movie",
                extra={"cursor": after, "movie_id": movie_id},
            )
            return None
        return bound_after(movie, order or DEFAULT_ORDER)

    async def list_movies(
        self,
        session: AsyncSession,
        filters: MovieFilters | None = None,
        pagination: MoviePagination | None = None,
        *,
        owner_id: int | None = None,
        default_page_size: int = 10,
    ) -> Connection[Movie]:
        """List one page of movies.

        Args:
            session: Database session
            filters: Optional filters, AND-ed together
            pagination: Page size, cursor and order; defaults to the first
                page ordered by title
            owner_id: Restrict to movies created by this user
            default_page_size: Page size when ``pagination`` is None

        Example:
            page = await repo.list_movies(session, MovieFilters(min_duration=90))
            page.page_info.end_cursor  # pass as ``after`` for the next page
        """
        predicates = compile_filters(filters, owner_id=owner_id)
        statement = self._filtered(predicates)

        order = pagination.order_by if pagination else None
        first = (pagination.first if pagination else None) or default_page_size
        after = pagination.after if pagination else None

        total_count = await self.count_matching(session, predicates)
        bound = await self.resolve_bound(session, after, order)

        return await self.paginate_keyset(
            session,
            statement,
            keyset_for(order, limit=first, bound=bound),
            total_count=total_count,
            has_previous_page=after is not None,
        )

    async def due_notifications(
        self,
        session: AsyncSession,
        today: date,
        *,
        limit: int = 100,
    ) -> Sequence[PendingNotification]:
        """Unsent release reminders dated on or before ``today``."""
        stmt = (
            select(PendingNotification)
            .where(
                PendingNotification.notification_sent.is_(False),
                PendingNotification.notification_date <= today,
            )
            .order_by(PendingNotification.notification_date, PendingNotification.id)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.unique().scalars().all()


_movie_repository: MovieRepository | None = None


def get_movie_repository() -> MovieRepository:
    """Get the shared MovieRepository instance."""
    global _movie_repository
    if _movie_repository is None:
        _movie_repository = MovieRepository()
    return _movie_repository


__all__ = ["MovieRepository", "get_movie_repository", "to_statement_filter"]
