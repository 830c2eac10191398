"""Unit tests for token validation clients."""

from __future__ import annotations

import httpx
import pytest

from movie_catalog.core.exceptions import ServiceUnavailableException, TokenInvalidError
from movie_catalog.core.settings import AuthSettings
from movie_catalog.infra.auth import HttpAuthClient, MockAuthClient


@pytest.fixture
def auth_settings() -> AuthSettings:
    return AuthSettings(service_url="http://identity.test", token_validation_endpoint="/token")


def _client(settings: AuthSettings, handler) -> HttpAuthClient:  # noqa: ANN001
    return HttpAuthClient(settings, transport=httpx.MockTransport(handler))


class TestMockAuthClient:
    async def test_registered_token(self):
        client = MockAuthClient()
        client.register_token("t1", user_id=4, email="ana@example.com")

        token = await client.validate_token("t1")

        assert token.user_id == 4
        assert token.email == "ana@example.com"

    async def test_revoked_token_rejected(self):
        client = MockAuthClient()
        client.register_token("t1", user_id=4)
        client.revoke_token("t1")

        with pytest.raises(TokenInvalidError):
            await client.validate_token("t1")

    async def test_dev_tokens_only_when_enabled(self):
        with pytest.raises(TokenInvalidError):
            await MockAuthClient().validate_token("dev-3")

        token = await MockAuthClient(accept_dev_tokens=True).validate_token("dev-3")

        assert token.user_id == 3

    @pytest.mark.parametrize("raw", ["dev-", "dev-abc", "dev-0", "user-3"])
    async def test_malformed_dev_tokens_rejected(self, raw):
        with pytest.raises(TokenInvalidError):
            await MockAuthClient(accept_dev_tokens=True).validate_token(raw)


class TestHttpAuthClient:
    async def test_valid_token(self, auth_settings):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"user_id": 7, "email": "ana@example.com"})

        token = await _client(auth_settings, handler).validate_token("abc")

        assert token.user_id == 7
        assert token.token == "abc"
        assert str(seen[0].url) == "http://identity.test/token"
        assert seen[0].headers["Authorization"] == "Bearer abc"

    @pytest.mark.parametrize("status_code", [401, 403, 404])
    async def test_rejected_token(self, auth_settings, status_code):
        client = _client(auth_settings, lambda request: httpx.Response(status_code))

        with pytest.raises(TokenInvalidError):
            await client.validate_token("abc")

    async def test_server_error_is_unavailable(self, auth_settings):
        client = _client(auth_settings, lambda request: httpx.Response(502))

        with pytest.raises(ServiceUnavailableException) as exc_info:
            await client.validate_token("abc")

        assert exc_info.value.type == "auth-service-error"

    async def test_connection_error_is_unavailable(self, auth_settings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(ServiceUnavailableException) as exc_info:
            await _client(auth_settings, handler).validate_token("abc")

        assert exc_info.value.type == "auth-service-unavailable"

    async def test_malformed_body_is_unavailable(self, auth_settings):
        client = _client(auth_settings, lambda request: httpx.Response(200, json={"id": 1}))

        with pytest.raises(ServiceUnavailableException):
            await client.validate_token("abc")

    def test_requires_service_url(self):
        with pytest.raises(ValueError, match="AUTH_SERVICE_URL"):
            HttpAuthClient(AuthSettings())
