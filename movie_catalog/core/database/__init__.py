"""Database building blocks: declarative base, repositories, filters.

Usage:
    from movie_catalog.core.database import BaseRepository, TimestampedBase
    from movie_catalog.core.database import NotFoundError, SearchFilter
"""

from movie_catalog.core.database.base import (
    NAMING_CONVENTION,
    Base,
    IntegerPKMixin,
    TimestampedBase,
    TimestampMixin,
)
from movie_catalog.core.database.exceptions import (
    InvalidFilterError,
    NotFoundError,
    RepositoryError,
)
from movie_catalog.core.database.filters import (
    CollectionFilter,
    EqualsFilter,
    FilterGroup,
    OnBeforeAfter,
    RangeFilter,
    RelatedCollectionFilter,
    SearchFilter,
    StatementFilter,
)
from movie_catalog.core.database.repository import BaseRepository

__all__ = [
    "NAMING_CONVENTION",
    "Base",
    "BaseRepository",
    "CollectionFilter",
    "EqualsFilter",
    "FilterGroup",
    "IntegerPKMixin",
    "InvalidFilterError",
    "NotFoundError",
    "OnBeforeAfter",
    "RangeFilter",
    "RelatedCollectionFilter",
    "RepositoryError",
    "SearchFilter",
    "StatementFilter",
    "TimestampMixin",
    "TimestampedBase",
]
