"""Bearer token validation."""

from __future__ import annotations

from movie_catalog.infra.auth.http_client import HttpAuthClient
from movie_catalog.infra.auth.models import AuthToken
from movie_catalog.infra.auth.protocols import AuthClient
from movie_catalog.infra.auth.testing import MockAuthClient

__all__ = ["AuthClient", "AuthToken", "HttpAuthClient", "MockAuthClient"]
