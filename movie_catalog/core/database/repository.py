"""Minimal generic repository for SQLAlchemy models.

Provides basic CRUD and cursor pagination with explicit session passing.
For complex queries, use the session directly.

Example:
    class GenreRepository(BaseRepository[Genre]):
        async def find_by_name(self, session: AsyncSession, name: str) -> Genre | None:
            return await self.get_by(session, Genre.name, name)

    genres = GenreRepository(Genre)
    genre = await genres.get(session, genre_id)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import Select, func, select

from movie_catalog.core.database.exceptions import NotFoundError
from movie_catalog.core.pagination.cursor import CursorCodec
from movie_catalog.core.pagination.schemas import Connection, Edge, PageInfo
from movie_catalog.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from sqlalchemy.ext.asyncio import AsyncSession
    from sqlalchemy.orm import InstrumentedAttribute

    from movie_catalog.core.pagination.filters import KeysetFilter


class BaseRepository[T]:
    """Generic repository for CRUD operations.

    Provides:
        - get(session, id) -> T | None
        - get_or_raise(session, id) -> T (raises NotFoundError)
        - get_by(session, attr, value) -> T | None
        - list(session, limit, offset) -> Sequence[T]
        - count(session, statement) -> int
        - paginate_keyset(session, statement, keyset) -> Connection[T]
        - create(session, instance) -> T
        - update(session, instance) -> T
        - delete(session, instance) -> None

    The session is always explicit; repositories hold no per-request state.
    """

    __slots__ = ("model", "_logger", "_lazy")

    def __init__(self, model: type[T]) -> None:
        self.model = model
        self._logger = logging.getLogger(f"repository.{model.__name__}")
        self._lazy = get_lazy_logger(f"repository.{model.__name__}")

    async def get(
        self,
        session: AsyncSession,
        id: Any,  # noqa: A002
        *,
        options: Iterable[Any] | None = None,
    ) -> T | None:
        """Get entity by primary key.

        Example:
            movie = await repo.get(session, 7, options=[selectinload(Movie.genres)])
        """
        if options:
            stmt = select(self.model).where(self._pk_attr() == id).options(*options)
            result = await session.execute(stmt)
            instance = result.scalar_one_or_none()
        else:
            instance = await session.get(self.model, id)

        self._lazy.debug(
            lambda: f"db.get: {self.model.__name__}({id}) -> {'found' if instance else 'not found'}"
        )
        return instance

    async def get_or_raise(
        self,
        session: AsyncSession,
        id: Any,  # noqa: A002
        *,
        options: Iterable[Any] | None = None,
    ) -> T:
        """Get entity by primary key.

        Raises:
            NotFoundError: If entity doesn't exist
        """
        instance = await self.get(session, id, options=options)
        if instance is None:
            self._logger.info(
                "Entity not found",
                extra={
                    "entity": self.model.__name__,
                    "id": str(id),
                    "operation": "db.get_or_raise",
                },
            )
            raise NotFoundError(self.model.__name__, {"id": id})
        return instance

    async def get_by(
        self,
        session: AsyncSession,
        attr: InstrumentedAttribute[Any],
        value: Any,
    ) -> T | None:
        """Get the entity whose ``attr`` equals ``value``."""
        stmt = select(self.model).where(attr == value)
        result = await session.execute(stmt)
        instance = result.scalar_one_or_none()

        self._lazy.debug(
            lambda: f"db.get_by: {self.model.__name__}.{attr.key}={value!r} -> {'found' if instance else 'not found'}"
        )
        return instance

    async def list(
        self,
        session: AsyncSession,
        *,
        limit: int | None = None,
        offset: int = 0,
        order_by: InstrumentedAttribute[Any] | None = None,
    ) -> Sequence[T]:
        """List entities in primary key order unless ``order_by`` is given.

        ``limit=None`` returns every row from ``offset`` on.
        """
        stmt = select(self.model).order_by(order_by if order_by is not None else self._pk_attr())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt.offset(offset))
        items = result.scalars().all()

        self._lazy.debug(
            lambda: f"db.list: {self.model.__name__}(limit={limit}, offset={offset}) -> {len(items)} items"
        )
        return items

    async def count(self, session: AsyncSession, statement: Select[tuple[T]]) -> int:
        """Count rows a statement would return, ignoring its ordering."""
        count_stmt = select(func.count()).select_from(statement.order_by(None).subquery())
        return (await session.execute(count_stmt)).scalar_one()

    async def paginate_keyset(
        self,
        session: AsyncSession,
        statement: Select[tuple[T]],
        keyset: KeysetFilter,
        *,
        total_count: int,
        has_previous_page: bool | None = None,
    ) -> Connection[T]:
        """Fetch one page through ``keyset`` and wrap it as a connection.

        The keyset filter fetches one extra row; its presence sets
        ``has_next_page`` and the row itself is dropped. Edge cursors are
        the primary keys of the rows.

        Args:
            session: Database session
            statement: Filtered statement without ordering or limit
            keyset: Ordering, seek bound and page size
            total_count: Size of the filtered set, reported as-is
            has_previous_page: Overrides the default of "a seek bound was
                applied", e.g. when a cursor was sent but no longer resolves
        """
        result = await session.execute(keyset.apply(statement))
        rows = list(result.scalars().all())

        has_more = len(rows) > keyset.limit
        if has_more:
            rows = rows[: keyset.limit]

        edges = [
            Edge(node=row, cursor=CursorCodec.encode(cast("Any", row).id)) for row in rows
        ]
        page_info = PageInfo(
            has_previous_page=(
                keyset.bound is not None if has_previous_page is None else has_previous_page
            ),
            has_next_page=has_more,
            start_cursor=edges[0].cursor if edges else None,
            end_cursor=edges[-1].cursor if edges else None,
        )

        self._lazy.debug(
            lambda: f"db.paginate_keyset: {self.model.__name__}(limit={keyset.limit}) -> {len(edges)}/{total_count} items, more={has_more}"
        )
        return Connection(edges=edges, page_info=page_info, total_count=total_count)

    async def create(self, session: AsyncSession, instance: T) -> T:
        """Persist a new entity and load server-generated values."""
        session.add(instance)
        await session.flush()
        await session.refresh(instance)

        entity_id = getattr(instance, "id", None)
        self._lazy.debug(lambda: f"db.create: {self.model.__name__}(id={entity_id})")
        return instance

    async def update(self, session: AsyncSession, instance: T) -> T:
        """Flush pending changes on a tracked entity and reload it."""
        session.add(instance)
        await session.flush()
        await session.refresh(instance)

        entity_id = getattr(instance, "id", None)
        self._lazy.debug(lambda: f"db.update: {self.model.__name__}(id={entity_id})")
        return instance

    async def delete(self, session: AsyncSession, instance: T) -> None:
        entity_id = getattr(instance, "id", None)
        await session.delete(instance)
        await session.flush()

        self._logger.info(
            "Entity deleted",
            extra={"entity": self.model.__name__, "id": str(entity_id), "operation": "db.delete"},
        )

    def _pk_attr(self) -> InstrumentedAttribute[Any]:
        return cast("InstrumentedAttribute[Any]", self.model.id)  # type: ignore[attr-defined]


__all__ = ["BaseRepository"]
