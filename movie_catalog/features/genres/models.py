"""SQLAlchemy model for genres."""

from __future__ import annotations

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from movie_catalog.core.database import TimestampedBase


class Genre(TimestampedBase):
    """A genre label. Movies reference genres; they never own them."""

    __tablename__ = "genres"
    __table_args__ = (UniqueConstraint("name", name="uq_genres_name"),)

    name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        index=True,
        comment="Unique genre name (e.g., 'Drama')",
    )

    def __repr__(self) -> str:
        return f"<Genre(id={self.id}, name={self.name!r})>"
