"""RFC 7807 Problem Details schemas for error responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProblemDetail(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    See: https://datatracker.ietf.org/doc/html/rfc7807

    Example:
        ProblemDetail(
            type="movie-not-found",
            title="Not Found",
            status=404,
            detail="Movie 42 not found",
            instance="/api/v1/movies/42",
        )
    """

    type: str = Field(
        default="about:blank",
        min_length=1,
        max_length=200,
        description="URI reference identifying the problem type",
    )
    title: str = Field(
        min_length=1, max_length=200, description="Short, human-readable summary of the problem"
    )
    status: int = Field(ge=100, le=599, description="HTTP status code")
    detail: str | None = Field(
        default=None,
        max_length=2000,
        description="Human-readable explanation specific to this occurrence",
    )
    instance: str | None = Field(
        default=None,
        max_length=500,
        description="URI reference identifying the specific occurrence",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "type": "movie-not-owner",
                "title": "Forbidden",
                "status": 403,
                "detail": "not authorized",
                "instance": "/api/v1/movies/42",
            }
        },
    )


class ValidationErrorItem(BaseModel):
    """One failing field."""

    field: str = Field(description="Dotted location, e.g. 'body.title'")
    message: str
    type: str
    value: Any | None = None


class ValidationProblemDetail(ProblemDetail):
    errors: list[ValidationErrorItem] = Field(default_factory=list)


__all__ = ["ProblemDetail", "ValidationErrorItem", "ValidationProblemDetail"]
