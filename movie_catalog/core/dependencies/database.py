"""Database dependencies for FastAPI route handlers.

Route handlers take a session with ``Depends(get_db_session)``; CLI
commands and scripts use ``get_async_session()`` from
``movie_catalog.infra.database`` directly. Both draw from the same
session factory.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.infra.database import get_async_session


async def get_db_session() -> AsyncGenerator[AsyncSession]:
    """FastAPI dependency for database session.

    Yields:
        Database session that is automatically closed after request.

    Example:
        @router.get("/genres")
        async def list_genres(session: Annotated[AsyncSession, Depends(get_db_session)]):
            ...
    """
    async with get_async_session() as session:
        yield session
