"""SQLAlchemy models for the movies feature."""

from __future__ import annotations

import enum
from datetime import date

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    Date,
    Enum,
    Float,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from movie_catalog.core.database import Base, TimestampedBase
from movie_catalog.features.genres.models import Genre


class MovieStatus(enum.StrEnum):
    RELEASED = "Released"
    IN_PRODUCTION = "InProduction"


# Many-to-many association table for movies <-> genres
movie_genres = Table(
    "movie_genres",
    Base.metadata,
    Column(
        "movie_id",
        ForeignKey("movies.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "genre_id",
        ForeignKey("genres.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Movie(TimestampedBase):
    """A catalog entry.

    ``created_by_id`` is assigned once when the movie is created and is the
    sole basis for authorizing later updates and deletes.
    """

    __tablename__ = "movies"
    __table_args__ = (
        CheckConstraint("rating IS NULL OR (rating >= 0 AND rating <= 10)", name="rating_range"),
        CheckConstraint("duration IS NULL OR duration >= 1", name="duration_positive"),
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    original_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    tagline: Mapped[str | None] = mapped_column(String(500), nullable=True)

    budget: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    revenue: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    profit: Mapped[int | None] = mapped_column(
        BigInteger,
        nullable=True,
        comment="revenue - budget, derived on write",
    )

    release_date: Mapped[date | None] = mapped_column(Date, nullable=True, index=True)
    duration: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Running time in minutes",
    )
    status: Mapped[MovieStatus] = mapped_column(
        Enum(MovieStatus, name="movie_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=MovieStatus.IN_PRODUCTION,
    )
    language: Mapped[str | None] = mapped_column(String(50), nullable=True)
    trailer_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    popularity: Mapped[int | None] = mapped_column(Integer, nullable=True)
    vote_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    rating: Mapped[float | None] = mapped_column(Float, nullable=True)

    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    image_key: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Object storage key of the poster",
    )
    backdrop_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    backdrop_key: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Object storage key of the backdrop",
    )

    created_by_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

    genres: Mapped[list[Genre]] = relationship(
        Genre,
        secondary=movie_genres,
        lazy="selectin",
        order_by=Genre.name,
    )

    @property
    def media_keys(self) -> list[str]:
        """Object storage keys referenced by this movie."""
        return [key for key in (self.image_key, self.backdrop_key) if key]

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title={self.title!r})>"


class PendingNotification(TimestampedBase):
    """A release-day reminder for a movie's owner.

    Rows are removed with their movie by the foreign key cascade.
    """

    __tablename__ = "pending_notifications"

    movie_id: Mapped[int] = mapped_column(
        ForeignKey("movies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    notification_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    notification_sent: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    movie: Mapped[Movie] = relationship(Movie, lazy="joined")

    def __repr__(self) -> str:
        return (
            f"<PendingNotification(id={self.id}, movie_id={self.movie_id}, "
            f"date={self.notification_date}, sent={self.notification_sent})>"
        )
