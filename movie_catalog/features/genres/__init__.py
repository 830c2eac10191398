"""Genres feature: the labels movies are tagged with."""

from __future__ import annotations

from .models import Genre
from .repository import GenreRepository, get_genre_repository
from .schemas import GenreCreate, GenreResponse
from .service import GenreService

__all__ = [
    "Genre",
    "GenreCreate",
    "GenreRepository",
    "GenreResponse",
    "GenreService",
    "get_genre_repository",
]
