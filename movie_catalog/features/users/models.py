"""SQLAlchemy model for catalog users."""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from movie_catalog.core.database import TimestampedBase


class User(TimestampedBase):
    """A person who owns movies in the catalog.

    Credentials are issued and checked by the identity service. A password
    hash, when one is synced here, is never serialized.
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email!r})>"
