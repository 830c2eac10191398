"""Sort keys and cursor positions for movie listings.

Every listing is ordered by one field plus ``id`` ascending as a tiebreak,
so the order is total even when many movies share a rating or have no
release date. NULLs are replaced by a fixed low value in both ORDER BY and
the cursor comparison; otherwise a NULL row could never be sought past.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import func, literal

from movie_catalog.core.pagination import KeysetBound, KeysetFilter
from movie_catalog.features.movies.models import Movie

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement


class MovieSortField(enum.StrEnum):
    TITLE = "title"
    RELEASE_DATE = "release_date"
    DURATION = "duration"
    RATING = "rating"
    CREATED_AT = "created_at"


class SortDirection(enum.StrEnum):
    ASC = "asc"
    DESC = "desc"


@dataclass(slots=True, frozen=True)
class MovieOrder:
    """Requested listing order. Defaults to title ascending."""

    field: MovieSortField = MovieSortField.TITLE
    direction: SortDirection = SortDirection.ASC


DEFAULT_ORDER = MovieOrder()

# Stand-ins for NULL; title is never NULL
_NULL_SUBSTITUTES: dict[MovieSortField, Any] = {
    MovieSortField.DURATION: 0,
    MovieSortField.RATING: 0.0,
    MovieSortField.RELEASE_DATE: date(1970, 1, 1),
    MovieSortField.CREATED_AT: datetime(1970, 1, 1, tzinfo=UTC),
}


def sort_key(field: MovieSortField) -> ColumnElement[Any]:
    """SQL expression the listing is ordered and sought on."""
    column = getattr(Movie, field.value)
    substitute = _NULL_SUBSTITUTES.get(field)
    if substitute is None:
        return column
    return func.coalesce(column, literal(substitute, type_=column.type))


def sort_key_value(movie: Movie, field: MovieSortField) -> Any:
    """Python-side value of ``sort_key(field)`` for a loaded movie."""
    value = getattr(movie, field.value)
    if value is None:
        return _NULL_SUBSTITUTES.get(field)
    return value


def bound_after(movie: Movie, order: MovieOrder) -> KeysetBound:
    """Cursor position just past ``movie`` in ``order``."""
    return KeysetBound(value=sort_key_value(movie, order.field), tiebreak=movie.id)


def keyset_for(
    order: MovieOrder | None,
    *,
    limit: int,
    bound: KeysetBound | None = None,
) -> KeysetFilter:
    """Keyset filter applying ``order`` (default title ascending)."""
    order = order or DEFAULT_ORDER
    return KeysetFilter(
        sort_key(order.field),
        Movie.id,
        direction=order.direction.value,
        bound=bound,
        limit=limit,
    )


__all__ = [
    "DEFAULT_ORDER",
    "MovieOrder",
    "MovieSortField",
    "SortDirection",
    "bound_after",
    "keyset_for",
    "sort_key",
    "sort_key_value",
]
