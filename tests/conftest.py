"""Pytest configuration and shared fixtures.

Organization:
    - Database Fixtures: in-memory SQLite engine and session
    - Data Fixtures: users, genres and movie factories
    - Collaborator Fixtures: in-memory storage, recording email provider,
      mock auth client
    - Application Fixtures: FastAPI app wired to the fixtures above and an
      HTTP client for it

Every test gets a fresh database; nothing here needs external services.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from sqlalchemy.ext.asyncio import AsyncEngine

# Ensure tests run without external infrastructure
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("APP_CREATE_SCHEMA_ON_STARTUP", "false")
os.environ.setdefault("STORAGE_ENABLED", "false")
os.environ.setdefault("EMAIL_BACKEND", "console")
os.environ.setdefault("NOTIFICATION_ENABLED", "true")
os.environ.setdefault("NOTIFICATION_DEV_MODE", "false")
os.environ.setdefault("AUTH_DEV_MODE", "false")

from movie_catalog.core.settings import EmailSettings  # noqa: E402
from movie_catalog.infra.email import BaseEmailProvider, EmailDeliveryResult  # noqa: E402
from movie_catalog.infra.storage import StorageError  # noqa: E402

OWNER_TOKEN = "owner-token"
OTHER_TOKEN = "other-token"


# ============================================================================
# Test doubles
# ============================================================================


class InMemoryStorage:
    """Storage backend double that records what it was asked to do."""

    def __init__(self, *, fail_deletes: bool = False) -> None:
        self.fail_deletes = fail_deletes
        self.deleted: list[str] = []
        self.presigned: list[tuple[str, str | None, int]] = []

    @property
    def backend_name(self) -> str:
        return "memory"

    async def generate_presigned_upload_url(
        self,
        key: str,
        content_type: str | None = None,
        expires_in: int = 3600,
    ) -> str:
        self.presigned.append((key, content_type, expires_in))
        return f"https://storage.test/movie-media/{key}?X-Expires={expires_in}"

    async def delete_object(self, key: str) -> bool:
        if self.fail_deletes:
            raise StorageError(f"Failed to delete {key}", code="DELETE_FAILED")
        self.deleted.append(key)
        return True


class RecordingEmailProvider(BaseEmailProvider):
    """Email provider that keeps sent messages in ``outbox``."""

    def __init__(self, *, fail: bool = False) -> None:
        super().__init__(EmailSettings())
        self.fail = fail
        self.outbox: list[Any] = []

    @property
    def provider_name(self) -> str:
        return "recording"

    async def _do_send(self, message):  # noqa: ANN001, ANN202
        if self.fail:
            return EmailDeliveryResult.failure_result(
                provider=self.provider_name,
                error="mailbox unavailable",
                error_code="SEND_FAILED",
            )
        self.outbox.append(message)
        return EmailDeliveryResult.success_result(
            message_id=f"msg-{len(self.outbox)}",
            provider=self.provider_name,
            recipients=message.all_recipients,
        )


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """Async engine on a private in-memory SQLite database.

    Foreign keys are switched on so ON DELETE CASCADE behaves as it does
    on PostgreSQL.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        echo=False,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_conn, connection_record) -> None:  # noqa: ANN001
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Session on a freshly created schema.

    Example:
        async def test_create_genre(db_session):
            db_session.add(Genre(name="Drama"))
            await db_session.flush()
    """
    from movie_catalog.core.database import Base
    from movie_catalog.features.genres import models as _genres  # noqa: F401
    from movie_catalog.features.movies import models as _movies  # noqa: F401
    from movie_catalog.features.users import models as _users  # noqa: F401

    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()

    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


# ============================================================================
# Data Fixtures
# ============================================================================


@pytest.fixture
def make_user(db_session: AsyncSession) -> Callable[..., Awaitable[Any]]:
    """Factory inserting a user.

    Example:
        user = await make_user("Ana", "ana@example.com")
    """
    from movie_catalog.features.users.models import User

    async def _make(name: str, email: str) -> User:
        user = User(name=name, email=email)
        db_session.add(user)
        await db_session.flush()
        return user

    return _make


@pytest.fixture
async def owner(make_user):  # noqa: ANN001, ANN201
    return await make_user("Olivia Owner", "owner@example.com")


@pytest.fixture
async def other_user(make_user):  # noqa: ANN001, ANN201
    return await make_user("Oscar Other", "other@example.com")


@pytest.fixture
def make_genre(db_session: AsyncSession) -> Callable[[str], Awaitable[Any]]:
    from movie_catalog.features.genres.models import Genre

    async def _make(name: str) -> Genre:
        genre = Genre(name=name)
        db_session.add(genre)
        await db_session.flush()
        return genre

    return _make


@pytest.fixture
def make_movie(db_session: AsyncSession) -> Callable[..., Awaitable[Any]]:
    """Factory inserting a movie straight into the database.

    Example:
        movie = await make_movie(owner, title="Alpha", duration=90)
    """
    from movie_catalog.features.movies.models import Movie

    async def _make(created_by: Any, *, genres: list[Any] | None = None, **fields: Any) -> Movie:
        fields.setdefault("title", "Untitled")
        movie = Movie(created_by_id=created_by.id, genres=genres or [], **fields)
        db_session.add(movie)
        await db_session.flush()
        return movie

    return _make


# ============================================================================
# Collaborator Fixtures
# ============================================================================


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def failing_storage() -> InMemoryStorage:
    return InMemoryStorage(fail_deletes=True)


@pytest.fixture
def email_provider() -> RecordingEmailProvider:
    return RecordingEmailProvider()


@pytest.fixture
def failing_email_provider() -> RecordingEmailProvider:
    return RecordingEmailProvider(fail=True)


@pytest.fixture
def auth_client(owner, other_user):  # noqa: ANN001, ANN201
    """Mock auth client that knows the ``owner`` and ``other_user`` tokens."""
    from movie_catalog.infra.auth import MockAuthClient

    client = MockAuthClient()
    client.register_token(OWNER_TOKEN, user_id=owner.id, email=owner.email)
    client.register_token(OTHER_TOKEN, user_id=other_user.id, email=other_user.email)
    return client


@pytest.fixture
def owner_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {OWNER_TOKEN}"}


@pytest.fixture
def other_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {OTHER_TOKEN}"}


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
async def app(db_session, auth_client, storage):  # noqa: ANN001, ANN201
    """FastAPI application bound to the test session and doubles.

    Routes share ``db_session``, so rows created by a fixture are visible
    to the request and rows committed by a request are visible to the test.
    """
    from movie_catalog.app.main import create_app
    from movie_catalog.core.dependencies.auth import get_auth_client
    from movie_catalog.core.dependencies.database import get_db_session
    from movie_catalog.core.dependencies.storage import get_optional_storage, get_storage

    application = create_app()

    async def _session_override() -> AsyncGenerator[AsyncSession]:
        yield db_session

    application.dependency_overrides[get_db_session] = _session_override
    application.dependency_overrides[get_auth_client] = lambda: auth_client
    application.dependency_overrides[get_optional_storage] = lambda: storage
    application.dependency_overrides[get_storage] = lambda: storage
    return application


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient]:  # noqa: ANN001
    """HTTP client for the test application.

    Example:
        async def test_list_genres(client):
            response = await client.get("/api/v1/genres")
            assert response.status_code == 200
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
