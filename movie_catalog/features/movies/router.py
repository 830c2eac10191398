"""API router for the movies feature.

Endpoints:
    GET    /movies       - Filtered, cursor-paginated listing
    GET    /movies/{id}  - Get a movie
    POST   /movies       - Create a movie (authenticated)
    PATCH  /movies/{id}  - Update a movie (owner only)
    DELETE /movies/{id}  - Delete a movie (owner only)
"""

from __future__ import annotations

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.core.dependencies.auth import AuthUserDep, OptionalAuthUser
from movie_catalog.core.dependencies.database import get_db_session
from movie_catalog.core.exceptions import MissingAuthenticationError
from movie_catalog.features.movies.dependencies import MovieServiceDep
from movie_catalog.features.movies.models import MovieStatus
from movie_catalog.features.movies.ordering import MovieOrder, MovieSortField, SortDirection
from movie_catalog.features.movies.schemas import (
    MovieConnection,
    MovieCreate,
    MovieDeleteResponse,
    MovieFilters,
    MoviePagination,
    MovieResponse,
    MovieUpdate,
)

router = APIRouter(prefix="/movies", tags=["movies"])

SessionDep = Annotated[AsyncSession, Depends(get_db_session)]


@router.get(
    "",
    response_model=MovieConnection,
    summary="List movies",
    description=(
        "Filters are combined with AND. Pass `page_info.end_cursor` as `after` "
        "to fetch the next page; `total_count` is the size of the filtered set."
    ),
)
async def list_movies(
    service: MovieServiceDep,
    user: OptionalAuthUser,
    search: Annotated[str | None, Query(max_length=200)] = None,
    min_duration: Annotated[int | None, Query(ge=1)] = None,
    max_duration: Annotated[int | None, Query(ge=1)] = None,
    release_date_from: date | None = None,
    release_date_to: date | None = None,
    genre_ids: Annotated[list[int] | None, Query()] = None,
    status_: Annotated[MovieStatus | None, Query(alias="status")] = None,
    language: Annotated[str | None, Query(max_length=50)] = None,
    first: Annotated[int | None, Query(ge=1, description="Page size")] = None,
    after: Annotated[str | None, Query(description="Cursor to resume after")] = None,
    order_field: MovieSortField = MovieSortField.TITLE,
    order_direction: SortDirection = SortDirection.ASC,
    mine: Annotated[bool, Query(description="Only movies created by the caller")] = False,
) -> MovieConnection:
    if mine and user is None:
        raise MissingAuthenticationError("Authentication required to list your own movies")

    filters = MovieFilters(
        search=search,
        min_duration=min_duration,
        max_duration=max_duration,
        release_date_from=release_date_from,
        release_date_to=release_date_to,
        genre_ids=genre_ids,
        status=status_,
        language=language,
    )
    pagination = MoviePagination(
        first=first,
        after=after,
        order_by=MovieOrder(order_field, order_direction),
    )

    connection = await service.list_movies(
        filters,
        pagination,
        owner_id=user.user_id if mine and user else None,
    )
    return connection.map_nodes(MovieResponse.model_validate)


@router.get(
    "/{movie_id}",
    response_model=MovieResponse,
    summary="Get movie",
    responses={404: {"description": "Movie not found"}},
)
async def get_movie(movie_id: int, service: MovieServiceDep) -> MovieResponse:
    movie = await service.get_movie(movie_id)
    return MovieResponse.model_validate(movie)


@router.post(
    "",
    response_model=MovieResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create movie",
    responses={404: {"description": "Unknown genre id"}},
)
async def create_movie(
    payload: MovieCreate,
    user: AuthUserDep,
    service: MovieServiceDep,
    session: SessionDep,
) -> MovieResponse:
    movie = await service.create_movie(payload, acting_user_id=user.user_id)
    await session.commit()
    return MovieResponse.model_validate(movie)


@router.patch(
    "/{movie_id}",
    response_model=MovieResponse,
    summary="Update movie",
    responses={
        403: {"description": "Caller does not own the movie"},
        404: {"description": "Movie or genre not found"},
    },
)
async def update_movie(
    movie_id: int,
    payload: MovieUpdate,
    user: AuthUserDep,
    service: MovieServiceDep,
    session: SessionDep,
) -> MovieResponse:
    movie = await service.update_movie(movie_id, payload, acting_user_id=user.user_id)
    await session.commit()
    return MovieResponse.model_validate(movie)


@router.delete(
    "/{movie_id}",
    response_model=MovieDeleteResponse,
    summary="Delete movie",
    responses={
        403: {"description": "Caller does not own the movie"},
        404: {"description": "Movie not found"},
    },
)
async def delete_movie(
    movie_id: int,
    user: AuthUserDep,
    service: MovieServiceDep,
) -> MovieDeleteResponse:
    deleted = await service.delete_movie(movie_id, acting_user_id=user.user_id)
    return MovieDeleteResponse(deleted=deleted)
