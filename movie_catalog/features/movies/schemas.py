"""Pydantic schemas for the movies feature."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from movie_catalog.core.pagination import Connection
from movie_catalog.features.genres.schemas import GenreResponse
from movie_catalog.features.movies.models import MovieStatus
from movie_catalog.features.movies.ordering import MovieOrder

_URL_PATTERN = r"^https?://\S+$"


class MovieBase(BaseModel):
    """Shared attributes for movie payloads."""

    title: str = Field(..., min_length=1, max_length=255, description="Display title")
    original_title: str | None = Field(default=None, max_length=255)
    description: str | None = Field(default=None)
    tagline: str | None = Field(default=None, max_length=500)
    budget: int | None = Field(default=None, ge=0)
    revenue: int | None = Field(default=None, ge=0)
    release_date: date | None = Field(default=None)
    duration: int | None = Field(default=None, ge=1, description="Running time in minutes")
    status: MovieStatus = Field(default=MovieStatus.IN_PRODUCTION)
    language: str | None = Field(default=None, max_length=50)
    trailer_url: str | None = Field(default=None, max_length=500, pattern=_URL_PATTERN)
    popularity: int | None = Field(default=None, ge=0)
    vote_count: int | None = Field(default=None, ge=0)
    rating: float | None = Field(default=None, ge=0, le=10)
    image_url: str | None = Field(default=None, max_length=500)
    image_key: str | None = Field(default=None, max_length=255)
    backdrop_url: str | None = Field(default=None, max_length=500)
    backdrop_key: str | None = Field(default=None, max_length=255)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            msg = "title must not be blank"
            raise ValueError(msg)
        return v


class MovieCreate(MovieBase):
    """Payload used when creating a movie."""

    genre_ids: list[int] = Field(default_factory=list, description="Genres to attach")


class MovieUpdate(BaseModel):
    """Partial update. Only fields present in the payload are changed.

    ``genre_ids``, when present, replaces the movie's genres entirely.
    The owner of a movie cannot be changed.
    """

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1, max_length=255)
    original_title: str | None = Field(default=None, max_length=255)
    description: str | None = None
    tagline: str | None = Field(default=None, max_length=500)
    budget: int | None = Field(default=None, ge=0)
    revenue: int | None = Field(default=None, ge=0)
    release_date: date | None = None
    duration: int | None = Field(default=None, ge=1)
    status: MovieStatus | None = None
    language: str | None = Field(default=None, max_length=50)
    trailer_url: str | None = Field(default=None, max_length=500, pattern=_URL_PATTERN)
    popularity: int | None = Field(default=None, ge=0)
    vote_count: int | None = Field(default=None, ge=0)
    rating: float | None = Field(default=None, ge=0, le=10)
    image_url: str | None = Field(default=None, max_length=500)
    image_key: str | None = Field(default=None, max_length=255)
    backdrop_url: str | None = Field(default=None, max_length=500)
    backdrop_key: str | None = Field(default=None, max_length=255)
    genre_ids: list[int] | None = None

    @field_validator("title", "status")
    @classmethod
    def reject_explicit_null(cls, v: object) -> object:
        if v is None:
            msg = "field cannot be null"
            raise ValueError(msg)
        return v

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            msg = "title must not be blank"
            raise ValueError(msg)
        return v


class MovieResponse(MovieBase):
    """Representation returned from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    profit: int | None = None
    created_by_id: int
    genres: list[GenreResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class MovieFilters(BaseModel):
    """Optional listing filters; every field is independent.

    ``min_duration`` greater than ``max_duration`` is accepted and simply
    matches nothing.
    """

    search: str | None = Field(
        default=None,
        max_length=200,
        description="Substring of title, original title or description",
    )
    min_duration: int | None = Field(default=None, ge=1)
    max_duration: int | None = Field(default=None, ge=1)
    release_date_from: date | None = None
    release_date_to: date | None = None
    genre_ids: list[int] | None = Field(
        default=None,
        description="Match movies having at least one of these genres",
    )
    status: MovieStatus | None = None
    language: str | None = Field(default=None, max_length=50)


class MoviePagination(BaseModel):
    """Page request: size, resume cursor and order."""

    first: int | None = Field(
        default=None,
        ge=1,
        description="Page size; the configured default when omitted",
    )
    after: str | None = Field(default=None, description="end_cursor of the previous page")
    order_by: MovieOrder | None = None


class MovieDeleteResponse(BaseModel):
    deleted: bool


MovieConnection = Connection[MovieResponse]


__all__ = [
    "MovieBase",
    "MovieConnection",
    "MovieCreate",
    "MovieDeleteResponse",
    "MovieFilters",
    "MoviePagination",
    "MovieResponse",
    "MovieUpdate",
]
