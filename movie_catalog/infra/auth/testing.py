"""Mock authentication client for tests and local development.

Usage:
    from movie_catalog.infra.auth.testing import MockAuthClient

    client = MockAuthClient()
    client.register_token("u1-token", user_id=1)
    app.dependency_overrides[get_auth_client] = lambda: client

With ``accept_dev_tokens=True`` any token of the form ``dev-<user_id>``
is accepted without registration (``AUTH_DEV_MODE``).
"""

from __future__ import annotations

import logging

from movie_catalog.core.exceptions import TokenInvalidError
from movie_catalog.infra.auth.models import AuthToken

logger = logging.getLogger(__name__)

DEV_TOKEN_PREFIX = "dev-"


class MockAuthClient:
    """Protocol-based test double for ``AuthClient``."""

    def __init__(self, *, accept_dev_tokens: bool = False) -> None:
        self._tokens: dict[str, AuthToken] = {}
        self._accept_dev_tokens = accept_dev_tokens

    @property
    def mode(self) -> str:
        return "mock"

    def register_token(self, token: str, user_id: int, email: str | None = None) -> None:
        self._tokens[token] = AuthToken(token=token, user_id=user_id, email=email)

    def revoke_token(self, token: str) -> None:
        self._tokens.pop(token, None)

    async def validate_token(self, token: str) -> AuthToken:
        if token in self._tokens:
            return self._tokens[token]

        if self._accept_dev_tokens and token.startswith(DEV_TOKEN_PREFIX):
            user_id = token.removeprefix(DEV_TOKEN_PREFIX)
            if user_id.isdigit() and int(user_id) > 0:
                logger.debug("Accepted development token", extra={"user_id": int(user_id)})
                return AuthToken(token=token, user_id=int(user_id))

        raise TokenInvalidError


__all__ = ["DEV_TOKEN_PREFIX", "MockAuthClient"]
