"""Unit tests for statement filters."""

from __future__ import annotations

from datetime import date

from sqlalchemy import select

from movie_catalog.core.database.filters import (
    CollectionFilter,
    EqualsFilter,
    FilterGroup,
    OnBeforeAfter,
    RangeFilter,
    RelatedCollectionFilter,
    SearchFilter,
)
from movie_catalog.features.genres.models import Genre
from movie_catalog.features.movies.models import Movie


def _sql(statement) -> str:  # noqa: ANN001
    return str(statement.compile(compile_kwargs={"literal_binds": True}))


class TestSearchFilter:
    async def test_multiple_fields_are_ored(self, db_session, owner, make_movie):
        await make_movie(owner, title="Alien")
        await make_movie(owner, title="Nostromo", description="An ALIEN stowaway")
        await make_movie(owner, title="Heat", description="Bank robbers")
        stmt = SearchFilter([Movie.title, Movie.description], "Alien").apply(
            select(Movie.title).order_by(Movie.title),
        )

        titles = (await db_session.execute(stmt)).scalars().all()

        assert titles == ["Alien", "Nostromo"]

    def test_wildcards_are_escaped(self):
        """A literal percent sign is not a wildcard."""
        stmt = SearchFilter(Movie.title, "100%").apply(select(Movie))

        assert "ESCAPE" in _sql(stmt)

    def test_empty_term_is_a_no_op(self):
        base = select(Movie)

        assert SearchFilter(Movie.title, "").apply(base) is base


class TestRangeFilter:
    def test_both_bounds_are_inclusive(self):
        stmt = RangeFilter(Movie.duration, minimum=90, maximum=120).apply(select(Movie))

        sql = _sql(stmt)

        assert "movies.duration >= 90" in sql
        assert "movies.duration <= 120" in sql

    def test_open_sides_add_nothing(self):
        stmt = RangeFilter(Movie.duration, minimum=90).apply(select(Movie))

        assert "<=" not in _sql(stmt)

    def test_date_range(self):
        stmt = OnBeforeAfter(
            Movie.release_date,
            on_or_after=date(1999, 1, 1),
            on_or_before=date(1999, 12, 31),
        ).apply(select(Movie))

        sql = _sql(stmt)

        assert "movies.release_date >=" in sql
        assert "1999-01-01" in sql
        assert "1999-12-31" in sql


class TestCollectionFilters:
    def test_equals(self):
        stmt = EqualsFilter(Movie.created_by_id, 3).apply(select(Movie))

        assert "movies.created_by_id = 3" in _sql(stmt)

    def test_in(self):
        stmt = CollectionFilter(Movie.id, [1, 2]).apply(select(Movie))

        assert "movies.id IN (1, 2)" in _sql(stmt)

    def test_empty_collection_matches_nothing(self):
        stmt = CollectionFilter(Movie.id, []).apply(select(Movie))

        assert "false" in _sql(stmt).lower() or "0 = 1" in _sql(stmt)

    def test_related_collection_uses_exists(self):
        stmt = RelatedCollectionFilter(Movie.genres, Genre.id, [4, 5]).apply(select(Movie))

        sql = _sql(stmt)

        assert "EXISTS" in sql
        assert "genres.id IN (4, 5)" in sql
        assert "JOIN" not in sql


class TestFilterGroup:
    async def test_filters_are_anded(self, db_session, owner, make_movie):
        await make_movie(owner, title="Heat", duration=170, language="en")
        await make_movie(owner, title="Amelie", duration=122, language="fr")
        await make_movie(owner, title="Short", duration=20, language="en")
        group = FilterGroup([
            RangeFilter(Movie.duration, minimum=90),
            EqualsFilter(Movie.language, "en"),
        ])

        titles = (await db_session.execute(group.apply(select(Movie.title)))).scalars().all()

        assert titles == ["Heat"]

    def test_empty_group_leaves_statement(self):
        base = select(Movie)

        assert FilterGroup([]).apply(base) is base
