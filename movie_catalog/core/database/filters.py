"""Composable WHERE-clause helpers for SQLAlchemy select statements.

Each filter is a small object whose ``apply()`` narrows a statement. They
are deliberately thin: the SQL they generate stays visible.

Usage:
    from sqlalchemy import select

    stmt = select(Movie)
    stmt = SearchFilter([Movie.title, Movie.description], "alien").apply(stmt)
    stmt = RangeFilter(Movie.duration, minimum=90, maximum=120).apply(stmt)

    result = await session.execute(stmt)
    movies = result.scalars().all()
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, false, func, or_

if TYPE_CHECKING:
    from datetime import date

    from sqlalchemy.orm import InstrumentedAttribute


class StatementFilter(ABC):
    """Base class for statement filters."""

    @abstractmethod
    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Return ``statement`` narrowed by this filter."""
        ...


class SearchFilter(StatementFilter):
    """Case-insensitive substring match across one or more columns.

    Multiple columns are OR-ed together. LIKE wildcards in the search term
    are escaped, so ``"100%"`` matches the literal text.

    Example:
        stmt = SearchFilter([Movie.title, Movie.original_title], "matrix").apply(stmt)
        # WHERE lower(title) LIKE '%matrix%' OR lower(original_title) LIKE '%matrix%'
    """

    def __init__(
        self,
        fields: InstrumentedAttribute[Any] | Sequence[InstrumentedAttribute[Any]],
        value: str,
    ):
        self.fields = [fields] if not isinstance(fields, Sequence) else list(fields)
        self.value = value

    def apply(self, statement: Select[Any]) -> Select[Any]:
        if not self.value or not self.fields:
            return statement

        term = self.value.lower()
        conditions = [
            func.lower(field).contains(term, autoescape=True) for field in self.fields
        ]
        return statement.where(or_(*conditions))


class RangeFilter(StatementFilter):
    """Inclusive lower and/or upper bound on a comparable column.

    Rows whose column is NULL never satisfy a bound. Inverted bounds
    (minimum greater than maximum) simply match nothing.

    Example:
        stmt = RangeFilter(Movie.duration, minimum=90, maximum=90).apply(stmt)
        # WHERE duration >= 90 AND duration <= 90
    """

    def __init__(
        self,
        field: InstrumentedAttribute[Any],
        *,
        minimum: Any | None = None,
        maximum: Any | None = None,
    ):
        self.field = field
        self.minimum = minimum
        self.maximum = maximum

    def apply(self, statement: Select[Any]) -> Select[Any]:
        if self.minimum is not None:
            statement = statement.where(self.field >= self.minimum)
        if self.maximum is not None:
            statement = statement.where(self.field <= self.maximum)
        return statement


class OnBeforeAfter(RangeFilter):
    """Inclusive date range.

    Example:
        stmt = OnBeforeAfter(
            Movie.release_date,
            on_or_after=date(1999, 1, 1),
            on_or_before=date(1999, 12, 31),
        ).apply(stmt)
    """

    def __init__(
        self,
        field: InstrumentedAttribute[Any],
        *,
        on_or_before: date | None = None,
        on_or_after: date | None = None,
    ):
        super().__init__(field, minimum=on_or_after, maximum=on_or_before)


class EqualsFilter(StatementFilter):
    """Exact match on a single column."""

    def __init__(self, field: InstrumentedAttribute[Any], value: Any):
        self.field = field
        self.value = value

    def apply(self, statement: Select[Any]) -> Select[Any]:
        return statement.where(self.field == self.value)


class CollectionFilter(StatementFilter):
    """Filter by collection (WHERE ... IN).

    An empty collection matches nothing.

    Example:
        stmt = CollectionFilter(Movie.id, [1, 2, 3]).apply(stmt)
    """

    def __init__(self, field: InstrumentedAttribute[Any], values: Sequence[Any]):
        self.field = field
        self.values = list(values)

    def apply(self, statement: Select[Any]) -> Select[Any]:
        if not self.values:
            return statement.where(false())
        return statement.where(self.field.in_(self.values))


class RelatedCollectionFilter(StatementFilter):
    """Match rows related to at least one target whose column is in ``values``.

    Compiles to ``EXISTS`` over the relationship rather than a JOIN, so a
    row related to several matching targets still appears once.

    Example:
        stmt = RelatedCollectionFilter(Movie.genres, Genre.id, [1, 2]).apply(stmt)
        # WHERE EXISTS (SELECT 1 FROM movie_genres, genres WHERE ... AND genres.id IN (1, 2))
    """

    def __init__(
        self,
        relationship: InstrumentedAttribute[Any],
        target_field: InstrumentedAttribute[Any],
        values: Sequence[Any],
    ):
        self.relationship = relationship
        self.target_field = target_field
        self.values = list(values)

    def apply(self, statement: Select[Any]) -> Select[Any]:
        if not self.values:
            return statement.where(false())
        return statement.where(self.relationship.any(self.target_field.in_(self.values)))


class FilterGroup(StatementFilter):
    """Apply several filters in sequence (logical AND)."""

    def __init__(self, filters: Sequence[StatementFilter]):
        self.filters = list(filters)

    def apply(self, statement: Select[Any]) -> Select[Any]:
        for filter_obj in self.filters:
            statement = filter_obj.apply(statement)
        return statement


__all__ = [
    "CollectionFilter",
    "EqualsFilter",
    "FilterGroup",
    "OnBeforeAfter",
    "RangeFilter",
    "RelatedCollectionFilter",
    "SearchFilter",
    "StatementFilter",
]
