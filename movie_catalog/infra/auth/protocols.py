"""Authentication client protocol.

Pattern: Protocol-based abstraction (PEP 544), like ``StorageBackend``.
Any class with these members satisfies it, so tests pass a
``MockAuthClient`` instead of patching HTTP.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from movie_catalog.infra.auth.models import AuthToken


@runtime_checkable
class AuthClient(Protocol):
    """Resolves bearer tokens to users.

    Implementations:
        - HttpAuthClient: asks the identity service over HTTP
        - MockAuthClient: token registry for tests and local development
    """

    @property
    def mode(self) -> str:
        """Implementation kind, e.g. "external" or "mock"."""
        ...

    async def validate_token(self, token: str) -> AuthToken:
        """Return the token's owner.

        Raises:
            TokenInvalidError: Token unknown or expired
            ServiceUnavailableException: Identity service unreachable
        """
        ...


__all__ = ["AuthClient"]
