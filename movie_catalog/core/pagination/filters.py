"""Keyset (seek) pagination filter.

Instead of OFFSET, the next page is selected with a WHERE clause that
seeks past the last row of the previous page. For ORDER BY key DESC, id ASC
resumed after (v, 7):

    WHERE (key < v) OR (key = v AND id > 7)

The tiebreak column keeps the order total when sort values repeat.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

from sqlalchemy import Select, and_, or_

from movie_catalog.core.database.filters import StatementFilter

if TYPE_CHECKING:
    from sqlalchemy.orm import InstrumentedAttribute
    from sqlalchemy.sql.elements import ColumnElement

    from movie_catalog.core.pagination.cursor import KeysetBound


class KeysetFilter(StatementFilter):
    """Order, seek and limit a statement for one page.

    Fetches ``limit + 1`` rows so the caller can tell whether another page
    exists without a second query.

    Example:
        stmt = KeysetFilter(
            sort_key=func.coalesce(Movie.rating, 0.0),
            tiebreak=Movie.id,
            direction="desc",
            bound=KeysetBound(value=7.5, tiebreak=12),
            limit=10,
        ).apply(select(Movie))

    Attributes:
        sort_key: Column or expression being ordered on
        tiebreak: Unique column ordered ascending after the sort key
        direction: Sort direction of ``sort_key``
        bound: Position to resume after (None for the first page)
        limit: Page size
    """

    def __init__(
        self,
        sort_key: ColumnElement[Any] | InstrumentedAttribute[Any],
        tiebreak: InstrumentedAttribute[Any],
        *,
        direction: Literal["asc", "desc"] = "asc",
        bound: KeysetBound | None = None,
        limit: int = 10,
    ) -> None:
        self.sort_key = sort_key
        self.tiebreak = tiebreak
        self.direction = direction
        self.bound = bound
        self.limit = limit

    def apply(self, statement: Select[Any]) -> Select[Any]:
        statement = self._apply_ordering(statement)
        if self.bound is not None:
            statement = statement.where(self.seek_condition())
        return statement.limit(self.limit + 1)

    def _apply_ordering(self, statement: Select[Any]) -> Select[Any]:
        key_order = self.sort_key.desc() if self.direction == "desc" else self.sort_key.asc()
        return statement.order_by(key_order, self.tiebreak.asc())

    def seek_condition(self) -> ColumnElement[bool]:
        """WHERE clause selecting rows strictly after ``bound``."""
        if self.bound is None:
            msg = "seek_condition requires a bound"
            raise ValueError(msg)

        if self.direction == "desc":
            past_value = self.sort_key < self.bound.value
        else:
            past_value = self.sort_key > self.bound.value

        same_value = and_(
            self.sort_key == self.bound.value,
            self.tiebreak > self.bound.tiebreak,
        )
        return or_(past_value, same_value)


__all__ = ["KeysetFilter"]
