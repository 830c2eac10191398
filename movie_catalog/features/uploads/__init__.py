"""Uploads feature: presigned URLs for movie media."""

from __future__ import annotations

from .schemas import PresignRequest, PresignResponse
from .service import UploadService, build_object_key

__all__ = ["PresignRequest", "PresignResponse", "UploadService", "build_object_key"]
