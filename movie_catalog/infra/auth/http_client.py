"""HTTP client for the external identity service (httpx).

The identity service issues tokens; this client only asks it who a token
belongs to:

    GET {AUTH_SERVICE_URL}{token_validation_endpoint}
    Authorization: Bearer <token>

    200 {"user_id": 7, "email": "ana@example.com", "expires_at": "..."}
    401 / 404 when the token is unknown or expired
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from movie_catalog.core.exceptions import ServiceUnavailableException, TokenInvalidError
from movie_catalog.infra.auth.models import AuthToken

if TYPE_CHECKING:
    from movie_catalog.core.settings import AuthSettings

logger = logging.getLogger(__name__)


class HttpAuthClient:
    """Token validation against the identity service.

    Example:
        client = HttpAuthClient(get_auth_settings())
        token = await client.validate_token(raw_token)
        token.user_id
    """

    def __init__(
        self,
        settings: AuthSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if settings.service_url is None:
            msg = "AUTH_SERVICE_URL is not configured"
            raise ValueError(msg)
        self._settings = settings
        self._base_url = str(settings.service_url).rstrip("/")
        self._transport = transport

    @property
    def mode(self) -> str:
        return "external"

    async def validate_token(self, token: str) -> AuthToken:
        url = f"{self._base_url}{self._settings.token_validation_endpoint}"
        try:
            async with httpx.AsyncClient(
                timeout=self._settings.request_timeout,
                verify=self._settings.verify_ssl,
                transport=self._transport,
            ) as client:
                response = await client.get(url, headers={"Authorization": f"Bearer {token}"})
        except httpx.HTTPError as e:
            logger.error("Identity service unreachable", extra={"url": url, "error": str(e)})
            raise ServiceUnavailableException(
                detail="Authentication service unavailable",
                type="auth-service-unavailable",
            ) from e

        if response.status_code in {401, 403, 404}:
            raise TokenInvalidError
        if response.status_code >= 400:
            logger.error(
                "Identity service returned an error",
                extra={"url": url, "status_code": response.status_code},
            )
            raise ServiceUnavailableException(
                detail="Authentication service returned an error",
                type="auth-service-error",
                extra={"status_code": response.status_code},
            )

        try:
            return AuthToken.model_validate({**response.json(), "token": token})
        except (ValueError, ValidationError) as e:
            logger.error("Malformed identity service response", extra={"error": str(e)})
            raise ServiceUnavailableException(
                detail="Authentication service returned an invalid response",
                type="auth-service-error",
            ) from e


__all__ = ["HttpAuthClient"]
