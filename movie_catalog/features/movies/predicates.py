"""Typed predicates for movie listings.

``compile_filters`` turns the optional fields of a ``MovieFilters`` request
into a flat list of predicates. Each present field contributes exactly one
predicate and the list is read as a logical AND; an empty list selects
every movie. Predicates are plain data so they can be inspected and tested
without a database; ``MovieRepository`` translates them to SQL.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date

    from movie_catalog.features.movies.schemas import MovieFilters

SEARCH_FIELDS: tuple[str, ...] = ("title", "original_title", "description")


@dataclass(slots=True, frozen=True)
class SearchContains:
    """Case-insensitive substring of ``term`` in any of ``fields``."""

    term: str
    fields: tuple[str, ...] = SEARCH_FIELDS


@dataclass(slots=True, frozen=True)
class RangeBound:
    """Inclusive numeric bounds; either side may be open."""

    field: str
    minimum: int | None = None
    maximum: int | None = None


@dataclass(slots=True, frozen=True)
class DateRange:
    """Inclusive date bounds. NULL dates satisfy neither side."""

    field: str
    start: date | None = None
    end: date | None = None


@dataclass(slots=True, frozen=True)
class InSet:
    """Membership in ``values``. For ``genre_ids``, any one genre matches."""

    field: str
    values: tuple[Any, ...]


@dataclass(slots=True, frozen=True)
class Equals:
    field: str
    value: Any


@dataclass(slots=True, frozen=True)
class TextContains:
    """Case-insensitive substring match on one text column."""

    field: str
    term: str


type Predicate = SearchContains | RangeBound | DateRange | InSet | Equals | TextContains


def _unique(values: Iterable[Any]) -> tuple[Any, ...]:
    return tuple(dict.fromkeys(values))


def compile_filters(
    filters: MovieFilters | None,
    *,
    owner_id: int | None = None,
) -> list[Predicate]:
    """Build the predicate list for a listing request.

    Args:
        filters: Requested filters; None selects everything
        owner_id: Restrict to movies created by this user

    Example:
        compile_filters(MovieFilters(search="alien", min_duration=90))
        # [SearchContains("alien"), RangeBound("duration", minimum=90)]
    """
    predicates: list[Predicate] = []

    if owner_id is not None:
        predicates.append(Equals("created_by_id", owner_id))

    if filters is None:
        return predicates

    if filters.search is not None and filters.search.strip():
        predicates.append(SearchContains(filters.search.strip()))

    if filters.min_duration is not None:
        predicates.append(RangeBound("duration", minimum=filters.min_duration))
    if filters.max_duration is not None:
        predicates.append(RangeBound("duration", maximum=filters.max_duration))

    if filters.release_date_from is not None:
        predicates.append(DateRange("release_date", start=filters.release_date_from))
    if filters.release_date_to is not None:
        predicates.append(DateRange("release_date", end=filters.release_date_to))

    if filters.genre_ids is not None:
        predicates.append(InSet("genre_ids", _unique(filters.genre_ids)))

    if filters.status is not None:
        predicates.append(Equals("status", filters.status))

    if filters.language is not None and filters.language.strip():
        predicates.append(TextContains("language", filters.language.strip()))

    return predicates


__all__ = [
    "SEARCH_FIELDS",
    "DateRange",
    "Equals",
    "InSet",
    "Predicate",
    "RangeBound",
    "SearchContains",
    "TextContains",
    "compile_filters",
]
