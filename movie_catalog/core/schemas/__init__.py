"""Schemas shared across features."""

from movie_catalog.core.schemas.problem_details import (
    ProblemDetail,
    ValidationErrorItem,
    ValidationProblemDetail,
)

__all__ = ["ProblemDetail", "ValidationErrorItem", "ValidationProblemDetail"]
