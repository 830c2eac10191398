"""Unit tests for listing predicates and their SQL translation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import pytest

from movie_catalog.core.database.exceptions import InvalidFilterError
from movie_catalog.core.database.filters import (
    EqualsFilter,
    OnBeforeAfter,
    RangeFilter,
    RelatedCollectionFilter,
    SearchFilter,
)
from movie_catalog.features.movies.models import MovieStatus
from movie_catalog.features.movies.predicates import (
    SEARCH_FIELDS,
    DateRange,
    Equals,
    InSet,
    RangeBound,
    SearchContains,
    TextContains,
    compile_filters,
)
from movie_catalog.features.movies.repository import to_statement_filter
from movie_catalog.features.movies.schemas import MovieFilters


class TestCompileFilters:
    """Each present filter field yields exactly one predicate."""

    def test_no_filters_selects_everything(self):
        assert compile_filters(None) == []
        assert compile_filters(MovieFilters()) == []

    def test_search(self):
        predicates = compile_filters(MovieFilters(search="  alien "))

        assert predicates == [SearchContains("alien")]
        assert predicates[0].fields == SEARCH_FIELDS

    def test_blank_search_is_ignored(self):
        assert compile_filters(MovieFilters(search="   ")) == []

    def test_duration_bounds_are_separate_predicates(self):
        predicates = compile_filters(MovieFilters(min_duration=90, max_duration=120))

        assert predicates == [
            RangeBound("duration", minimum=90),
            RangeBound("duration", maximum=120),
        ]

    def test_inverted_duration_bounds_are_kept(self):
        """min > max is not rejected; it just selects nothing."""
        predicates = compile_filters(MovieFilters(min_duration=100, max_duration=50))

        assert len(predicates) == 2

    def test_release_date_range(self):
        predicates = compile_filters(
            MovieFilters(
                release_date_from=date(2020, 1, 1),
                release_date_to=date(2020, 12, 31),
            ),
        )

        assert predicates == [
            DateRange("release_date", start=date(2020, 1, 1)),
            DateRange("release_date", end=date(2020, 12, 31)),
        ]

    def test_genre_ids_are_deduplicated_in_order(self):
        predicates = compile_filters(MovieFilters(genre_ids=[3, 1, 3]))

        assert predicates == [InSet("genre_ids", (3, 1))]

    def test_empty_genre_ids_is_still_a_predicate(self):
        assert compile_filters(MovieFilters(genre_ids=[])) == [InSet("genre_ids", ())]

    def test_status_and_language(self):
        predicates = compile_filters(
            MovieFilters(status=MovieStatus.RELEASED, language=" en "),
        )

        assert predicates == [
            Equals("status", MovieStatus.RELEASED),
            TextContains("language", "en"),
        ]

    def test_owner_comes_first(self):
        predicates = compile_filters(MovieFilters(min_duration=90), owner_id=5)

        assert predicates[0] == Equals("created_by_id", 5)
        assert len(predicates) == 2


class TestToStatementFilter:
    """Predicates map onto the generic statement filters."""

    @pytest.mark.parametrize(
        ("predicate", "expected"),
        [
            (SearchContains("x"), SearchFilter),
            (RangeBound("duration", minimum=1), RangeFilter),
            (DateRange("release_date", start=date(2000, 1, 1)), OnBeforeAfter),
            (InSet("genre_ids", (1,)), RelatedCollectionFilter),
            (Equals("status", MovieStatus.RELEASED), EqualsFilter),
            (TextContains("language", "en"), SearchFilter),
        ],
    )
    def test_mapping(self, predicate, expected):
        assert isinstance(to_statement_filter(predicate), expected)

    def test_unknown_field_is_rejected(self):
        with pytest.raises(InvalidFilterError) as exc_info:
            to_statement_filter(RangeBound("box_office_rank", minimum=1))

        assert exc_info.value.details == {"filter": "box_office_rank"}

    def test_unknown_predicate_is_rejected(self):
        @dataclass
        class Unsupported:
            field: str

        with pytest.raises(InvalidFilterError):
            to_statement_filter(Unsupported("title"))  # type: ignore[arg-type]
