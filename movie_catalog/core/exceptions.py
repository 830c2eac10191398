"""Application exception hierarchy.

Every error that should reach a client as an HTTP response derives from
``AppException`` and is rendered as an RFC 7807 problem document by the
handlers in ``movie_catalog.app.exception_handlers``.
"""

from __future__ import annotations

from typing import Any


class AppException(Exception):
    """Base application exception.

    Attributes:
        status_code: HTTP status code for the error.
        detail: Human-readable error message.
        type: Problem type identifier.
        title: Short summary of the problem type.
        instance: URI reference of this specific occurrence.
        extra: Additional context merged into the problem document.

    Example:
        raise AppException(
            status_code=404,
            detail="Movie 42 not found",
            type="movie-not-found",
            extra={"movie_id": 42},
        )
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        type: str = "about:blank",
        title: str | None = None,
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        self.detail = detail
        self.type = type
        self.title = title or self._default_title(status_code)
        self.instance = instance
        self.extra = extra or {}
        super().__init__(detail)

    @staticmethod
    def _default_title(status_code: int) -> str:
        titles = {
            400: "Bad Request",
            401: "Unauthorized",
            403: "Forbidden",
            404: "Not Found",
            409: "Conflict",
            422: "Unprocessable Entity",
            500: "Internal Server Error",
            502: "Bad Gateway",
            503: "Service Unavailable",
        }
        return titles.get(status_code, "Error")


class NotFoundException(AppException):
    """A referenced resource does not exist.

    Example:
        raise NotFoundException(
            detail="Movie 42 not found",
            type="movie-not-found",
            extra={"movie_id": 42},
        )
    """

    def __init__(
        self,
        detail: str,
        type: str = "not-found",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=404,
            detail=detail,
            type=type,
            title="Not Found",
            instance=instance,
            extra=extra,
        )


class ValidationException(AppException):
    """Input that passed schema validation but is semantically invalid."""

    def __init__(
        self,
        detail: str,
        type: str = "validation-error",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=422,
            detail=detail,
            type=type,
            title="Validation Error",
            instance=instance,
            extra=extra,
        )


class UnauthorizedException(AppException):
    """Authentication is missing or was rejected."""

    def __init__(
        self,
        detail: str,
        type: str = "unauthorized",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=401,
            detail=detail,
            type=type,
            title="Unauthorized",
            instance=instance,
            extra=extra,
        )


class ForbiddenException(AppException):
    """The caller is authenticated but may not perform the action.

    Example:
        raise ForbiddenException(
            detail="not authorized",
            type="movie-not-owner",
            extra={"movie_id": 42},
        )
    """

    def __init__(
        self,
        detail: str,
        type: str = "forbidden",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=403,
            detail=detail,
            type=type,
            title="Forbidden",
            instance=instance,
            extra=extra,
        )


class ConflictException(AppException):
    """The request conflicts with existing state (e.g. a duplicate name)."""

    def __init__(
        self,
        detail: str,
        type: str = "conflict",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=409,
            detail=detail,
            type=type,
            title="Conflict",
            instance=instance,
            extra=extra,
        )


class ServiceUnavailableException(AppException):
    """A collaborator the request depends on is unreachable."""

    def __init__(
        self,
        detail: str,
        type: str = "service-unavailable",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=503,
            detail=detail,
            type=type,
            title="Service Unavailable",
            instance=instance,
            extra=extra,
        )


class MissingAuthenticationError(UnauthorizedException):
    """No bearer token was supplied."""

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(detail=detail, type="missing-authentication")


class TokenInvalidError(UnauthorizedException):
    """The bearer token was rejected by the auth service."""

    def __init__(self, detail: str = "Invalid or expired token") -> None:
        super().__init__(detail=detail, type="token-invalid")


__all__ = [
    "AppException",
    "ConflictException",
    "ForbiddenException",
    "MissingAuthenticationError",
    "NotFoundException",
    "ServiceUnavailableException",
    "TokenInvalidError",
    "UnauthorizedException",
    "ValidationException",
]
