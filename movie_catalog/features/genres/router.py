"""API router for the genres feature.

Endpoints:
    GET  /genres  - List all genres by name
    POST /genres  - Create a genre (authenticated)
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.core.dependencies.auth import AuthUserDep
from movie_catalog.core.dependencies.database import get_db_session
from movie_catalog.features.genres.schemas import GenreCreate, GenreResponse
from movie_catalog.features.genres.service import GenreService

router = APIRouter(prefix="/genres", tags=["genres"])


@router.get(
    "",
    response_model=list[GenreResponse],
    summary="List genres",
)
async def list_genres(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> list[GenreResponse]:
    genres = await GenreService(session).list_genres()
    return [GenreResponse.model_validate(genre) for genre in genres]


@router.post(
    "",
    response_model=GenreResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a genre",
    description="Genre names are unique regardless of case.",
    responses={409: {"description": "Genre name already exists"}},
)
async def create_genre(
    payload: GenreCreate,
    user: AuthUserDep,
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> GenreResponse:
    _ = user
    genre = await GenreService(session).create_genre(payload)
    await session.commit()
    return GenreResponse.model_validate(genre)
