"""Presigned upload URLs for movie posters and backdrops."""

from __future__ import annotations

import logging
import uuid
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from movie_catalog.core.exceptions import ServiceUnavailableException, ValidationException
from movie_catalog.core.settings import get_storage_settings
from movie_catalog.features.uploads.schemas import PresignResponse
from movie_catalog.infra.storage import StorageError

if TYPE_CHECKING:
    from movie_catalog.core.settings import StorageSettings
    from movie_catalog.features.uploads.schemas import PresignRequest
    from movie_catalog.infra.storage import StorageBackend

logger = logging.getLogger(__name__)


def build_object_key(folder: str, filename: str) -> str:
    """``{folder}/{uuid}.{ext}``; the client's filename only supplies the extension.

    Example:
        build_object_key("images", "Poster.JPG")  # "images/3f2a...c9.jpg"
    """
    suffix = PurePosixPath(filename).suffix.lower()
    return f"{folder}/{uuid.uuid4()}{suffix}"


class UploadService:
    def __init__(
        self,
        storage: StorageBackend,
        settings: StorageSettings | None = None,
    ) -> None:
        self._storage = storage
        self._settings = settings or get_storage_settings()

    async def presign(self, request: PresignRequest, user_id: int) -> PresignResponse:
        """Reserve a key and return a URL to upload it to.

        Raises:
            ValidationException: If the folder is not an allowed upload folder
            ServiceUnavailableException: If the storage backend fails
        """
        if request.folder not in self._settings.allowed_folders:
            raise ValidationException(
                detail=f"Folder '{request.folder}' is not allowed",
                type="upload-folder-not-allowed",
                extra={"allowed_folders": self._settings.allowed_folders},
            )

        key = build_object_key(request.folder, request.filename)
        expires_in = self._settings.presigned_url_expiry_seconds
        try:
            url = await self._storage.generate_presigned_upload_url(
                key,
                content_type=request.content_type,
                expires_in=expires_in,
            )
        except StorageError as e:
            raise ServiceUnavailableException(
                detail="Could not create an upload URL",
                type="storage-unavailable",
            ) from e

        logger.info("Upload URL issued", extra={"key": key, "user_id": user_id})
        return PresignResponse(upload_url=url, key=key, expires_in=expires_in)


__all__ = ["UploadService", "build_object_key"]
