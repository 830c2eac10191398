"""Authentication dependencies.

Import the type aliases in routers:

    from movie_catalog.core.dependencies.auth import AuthUserDep, OptionalAuthUser

    @router.post("/movies")
    async def create_movie(payload: MovieCreate, user: AuthUserDep): ...

The token comes from ``Authorization: Bearer <token>``. Tests replace the
client with ``app.dependency_overrides[get_auth_client]``.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header, Request

from movie_catalog.core.exceptions import MissingAuthenticationError, TokenInvalidError
from movie_catalog.core.settings import get_auth_settings
from movie_catalog.infra.auth import AuthClient, AuthToken, HttpAuthClient, MockAuthClient
from movie_catalog.infra.logging import set_log_context

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_auth_client() -> AuthClient:
    """Client selected by settings.

    ``AUTH_DEV_MODE`` without ``AUTH_SERVICE_URL`` accepts ``dev-<user_id>``
    tokens only; with both set, the HTTP client is used.
    """
    settings = get_auth_settings()
    if settings.service_url is None:
        if not settings.dev_mode:
            logger.warning("AUTH_SERVICE_URL not set; all bearer tokens will be rejected")
        return MockAuthClient(accept_dev_tokens=settings.dev_mode)
    return HttpAuthClient(settings)


AuthClientDep = Annotated[AuthClient, Depends(get_auth_client)]


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise TokenInvalidError("Authorization header must be 'Bearer <token>'")
    return token.strip()


async def get_auth_user_optional(
    request: Request,
    client: AuthClientDep,
    authorization: Annotated[str | None, Header()] = None,
) -> AuthToken | None:
    """Authenticated user, or None when no Authorization header is sent.

    A header that is present but invalid still fails with 401.
    """
    token = _bearer_token(authorization)
    if token is None:
        return None

    auth_token = await client.validate_token(token)
    set_log_context(user_id=auth_token.user_id)
    request.state.user = auth_token
    return auth_token


async def get_auth_user(
    user: Annotated[AuthToken | None, Depends(get_auth_user_optional)],
) -> AuthToken:
    """Authenticated user (required).

    Raises:
        MissingAuthenticationError: No Authorization header
        TokenInvalidError: Token rejected
    """
    if user is None:
        raise MissingAuthenticationError
    return user


AuthUserDep = Annotated[AuthToken, Depends(get_auth_user)]
OptionalAuthUser = Annotated[AuthToken | None, Depends(get_auth_user_optional)]


__all__ = [
    "AuthClientDep",
    "AuthUserDep",
    "OptionalAuthUser",
    "get_auth_client",
    "get_auth_user",
    "get_auth_user_optional",
]
