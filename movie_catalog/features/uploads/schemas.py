"""Schemas for presigned media uploads."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PresignRequest(BaseModel):
    folder: str = Field(..., min_length=1, max_length=50, examples=["images"])
    filename: str = Field(..., min_length=1, max_length=255, examples=["poster.jpg"])
    content_type: str = Field(
        ...,
        min_length=3,
        max_length=100,
        pattern=r"^[\w.+-]+/[\w.+-]+$",
        examples=["image/jpeg"],
    )


class PresignResponse(BaseModel):
    """Where to PUT the file and the key to store on the movie."""

    upload_url: str
    key: str
    expires_in: int


__all__ = ["PresignRequest", "PresignResponse"]
