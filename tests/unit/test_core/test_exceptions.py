"""Unit tests for the application exception hierarchy."""

from __future__ import annotations

from movie_catalog.core.database.exceptions import InvalidFilterError, NotFoundError
from movie_catalog.core.exceptions import (
    AppException,
    ConflictException,
    ForbiddenException,
    MissingAuthenticationError,
    NotFoundException,
    TokenInvalidError,
    UnauthorizedException,
    ValidationException,
)


class TestAppExceptions:
    def test_default_title_from_status(self):
        exc = AppException(status_code=409, detail="taken")

        assert exc.title == "Conflict"
        assert exc.type == "about:blank"
        assert exc.extra == {}

    def test_unknown_status_title(self):
        assert AppException(status_code=418, detail="teapot").title == "Error"

    def test_subclass_status_codes(self):
        assert NotFoundException("x").status_code == 404
        assert ValidationException("x").status_code == 422
        assert ForbiddenException("x").status_code == 403
        assert ConflictException("x").status_code == 409
        assert UnauthorizedException("x").status_code == 401

    def test_forbidden_carries_type_and_extra(self):
        exc = ForbiddenException(
            detail="not authorized",
            type="movie-not-owner",
            extra={"movie_id": 3},
        )

        assert str(exc) == "not authorized"
        assert exc.type == "movie-not-owner"
        assert exc.extra == {"movie_id": 3}

    def test_auth_errors_are_unauthorized(self):
        assert isinstance(MissingAuthenticationError(), UnauthorizedException)
        assert MissingAuthenticationError().type == "missing-authentication"
        assert TokenInvalidError().type == "token-invalid"


class TestRepositoryExceptions:
    def test_not_found_message(self):
        exc = NotFoundError("Movie", {"id": 7})

        assert str(exc) == "Movie not found with id=7 (model='Movie', id=7)"
        assert exc.model_name == "Movie"

    def test_invalid_filter_details(self):
        exc = InvalidFilterError("bad field", filter_name="colour")

        assert exc.details == {"filter": "colour"}
