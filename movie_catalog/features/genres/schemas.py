"""Pydantic schemas for the genres feature."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GenreCreate(BaseModel):
    """Payload used when creating a genre."""

    name: str = Field(..., min_length=1, max_length=50, description="Unique genre name")

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            msg = "name must not be blank"
            raise ValueError(msg)
        return v


class GenreResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


__all__ = ["GenreCreate", "GenreResponse"]
