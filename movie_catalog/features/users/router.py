"""API router for the users feature.

Endpoints:
    GET /users/me - The authenticated user's profile
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.core.dependencies.auth import AuthUserDep
from movie_catalog.core.dependencies.database import get_db_session
from movie_catalog.features.users.schemas import UserResponse
from movie_catalog.features.users.service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Current user",
    responses={404: {"description": "Token is valid but the user is not registered here"}},
)
async def get_me(
    user: AuthUserDep,
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> UserResponse:
    me = await UserService(session).get_user(user.user_id)
    return UserResponse.model_validate(me)
