"""Unit tests for sort keys and cursor positions."""

from __future__ import annotations

from datetime import UTC, date, datetime

from sqlalchemy import select

from movie_catalog.core.pagination import KeysetBound
from movie_catalog.features.movies.models import Movie
from movie_catalog.features.movies.ordering import (
    DEFAULT_ORDER,
    MovieOrder,
    MovieSortField,
    SortDirection,
    bound_after,
    keyset_for,
    sort_key,
    sort_key_value,
)


def _movie(**fields) -> Movie:  # noqa: ANN003
    fields.setdefault("title", "Alpha")
    movie = Movie(created_by_id=1, **fields)
    movie.id = fields.get("id", 1)
    return movie


class TestSortKeys:
    def test_default_order_is_title_ascending(self):
        assert DEFAULT_ORDER == MovieOrder(MovieSortField.TITLE, SortDirection.ASC)

    def test_title_key_is_the_column(self):
        sql = str(sort_key(MovieSortField.TITLE).compile())

        assert sql == "movies.title"

    def test_nullable_keys_are_coalesced(self):
        sql = str(sort_key(MovieSortField.DURATION).compile())

        assert sql.startswith("coalesce(movies.duration")

    def test_created_at_key_is_coalesced(self):
        sql = str(sort_key(MovieSortField.CREATED_AT).compile())

        assert sql.startswith("coalesce(movies.created_at")

    def test_null_values_use_the_same_substitutes(self):
        movie = _movie()

        assert sort_key_value(movie, MovieSortField.DURATION) == 0
        assert sort_key_value(movie, MovieSortField.RATING) == 0.0
        assert sort_key_value(movie, MovieSortField.RELEASE_DATE) == date(1970, 1, 1)
        epoch = datetime(1970, 1, 1, tzinfo=UTC)
        assert sort_key_value(movie, MovieSortField.CREATED_AT) == epoch

    def test_present_values_pass_through(self):
        movie = _movie(duration=95, rating=7.5)

        assert sort_key_value(movie, MovieSortField.DURATION) == 95
        assert sort_key_value(movie, MovieSortField.RATING) == 7.5
        assert sort_key_value(movie, MovieSortField.TITLE) == "Alpha"


class TestBounds:
    def test_bound_after_uses_sort_value_and_id(self):
        movie = _movie(id=12, rating=8.0)

        bound = bound_after(movie, MovieOrder(MovieSortField.RATING, SortDirection.DESC))

        assert bound == KeysetBound(value=8.0, tiebreak=12)

    def test_keyset_for_defaults(self):
        keyset = keyset_for(None, limit=3)

        assert keyset.direction == "asc"
        assert keyset.limit == 3
        assert keyset.bound is None
        sql = str(keyset.apply(select(Movie)).compile(compile_kwargs={"literal_binds": True}))
        assert "ORDER BY movies.title ASC, movies.id ASC" in sql

    def test_keyset_for_descending(self):
        keyset = keyset_for(
            MovieOrder(MovieSortField.CREATED_AT, SortDirection.DESC),
            limit=10,
            bound=KeysetBound(value=None, tiebreak=1),
        )

        assert keyset.direction == "desc"
        assert keyset.bound == KeysetBound(value=None, tiebreak=1)
