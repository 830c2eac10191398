"""Movies feature: catalog entries, listing and owner-only changes."""

from __future__ import annotations

from .models import Movie, MovieStatus, PendingNotification
from .notifications import ReleaseNotifier
from .ordering import MovieOrder, MovieSortField, SortDirection
from .ownership import Allowed, Denied, authorize_mutation
from .predicates import compile_filters
from .repository import MovieRepository, get_movie_repository
from .schemas import (
    MovieConnection,
    MovieCreate,
    MovieDeleteResponse,
    MovieFilters,
    MoviePagination,
    MovieResponse,
    MovieUpdate,
)
from .service import MovieService

__all__ = [
    "Allowed",
    "Denied",
    "Movie",
    "MovieConnection",
    "MovieCreate",
    "MovieDeleteResponse",
    "MovieFilters",
    "MovieOrder",
    "MoviePagination",
    "MovieRepository",
    "MovieResponse",
    "MovieService",
    "MovieSortField",
    "MovieStatus",
    "MovieUpdate",
    "PendingNotification",
    "ReleaseNotifier",
    "SortDirection",
    "authorize_mutation",
    "compile_filters",
    "get_movie_repository",
]
