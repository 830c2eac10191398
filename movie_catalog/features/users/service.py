"""Service layer for the users feature."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from movie_catalog.core.exceptions import ConflictException, NotFoundException
from movie_catalog.features.users.models import User
from movie_catalog.features.users.repository import UserRepository, get_user_repository

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from movie_catalog.features.users.schemas import UserCreate

logger = logging.getLogger(__name__)


class UserService:
    def __init__(
        self,
        session: AsyncSession,
        repo: UserRepository | None = None,
    ) -> None:
        self._session = session
        self._repo = repo or get_user_repository()

    async def get_user(self, user_id: int) -> User:
        """Fetch a user.

        Raises:
            NotFoundException: If the user doesn't exist
        """
        user = await self._repo.get(self._session, user_id)
        if user is None:
            raise NotFoundException(
                detail=f"User {user_id} not found",
                type="user-not-found",
                extra={"user_id": user_id},
            )
        return user

    async def create_user(self, payload: UserCreate) -> User:
        """Register a user known to the identity service.

        Raises:
            ConflictException: If the email is taken
        """
        if await self._repo.get_by_email(self._session, payload.email) is not None:
            raise ConflictException(
                detail=f"User with email '{payload.email}' already exists",
                type="user-email-exists",
            )
        user = await self._repo.create(
            self._session,
            User(name=payload.name, email=payload.email),
        )
        logger.info("User created", extra={"user_id": user.id})
        return user
