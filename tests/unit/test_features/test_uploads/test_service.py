"""Unit tests for presigned upload URLs."""

from __future__ import annotations

import re

import pytest

from movie_catalog.core.exceptions import ServiceUnavailableException, ValidationException
from movie_catalog.core.settings import StorageSettings
from movie_catalog.features.uploads.schemas import PresignRequest
from movie_catalog.features.uploads.service import UploadService, build_object_key
from movie_catalog.infra.storage import StorageError

KEY_PATTERN = re.compile(r"^images/[0-9a-f-]{36}\.jpg$")


class TestBuildObjectKey:
    def test_key_uses_folder_uuid_and_lowercased_extension(self):
        assert KEY_PATTERN.match(build_object_key("images", "My Poster.JPG"))

    def test_no_extension(self):
        key = build_object_key("backdrops", "README")

        assert key.startswith("backdrops/")
        assert "." not in key

    def test_keys_are_unique(self):
        assert build_object_key("images", "a.png") != build_object_key("images", "a.png")


class _BrokenStorage:
    backend_name = "broken"

    async def generate_presigned_upload_url(  # noqa: ANN201
        self, key, content_type=None, expires_in=3600  # noqa: ANN001
    ):
        raise StorageError("signature failed")

    async def delete_object(self, key):  # noqa: ANN001, ANN201
        raise StorageError("delete failed")


class TestUploadService:
    @pytest.fixture
    def settings(self) -> StorageSettings:
        return StorageSettings(
            allowed_folders=["images", "backdrops"],
            presigned_url_expiry_seconds=900,
        )

    async def test_presign(self, storage, settings):
        service = UploadService(storage, settings)

        response = await service.presign(
            PresignRequest(folder="images", filename="poster.jpg", content_type="image/jpeg"),
            user_id=1,
        )

        assert KEY_PATTERN.match(response.key)
        assert response.expires_in == 900
        assert response.key in response.upload_url
        assert storage.presigned == [(response.key, "image/jpeg", 900)]

    async def test_folder_must_be_allowed(self, storage, settings):
        service = UploadService(storage, settings)

        with pytest.raises(ValidationException) as exc_info:
            await service.presign(
                PresignRequest(folder="secrets", filename="a.jpg", content_type="image/jpeg"),
                user_id=1,
            )

        assert exc_info.value.type == "upload-folder-not-allowed"
        assert storage.presigned == []

    async def test_storage_failure_is_unavailable(self, settings):
        service = UploadService(_BrokenStorage(), settings)

        with pytest.raises(ServiceUnavailableException):
            await service.presign(
                PresignRequest(folder="images", filename="a.jpg", content_type="image/jpeg"),
                user_id=1,
            )
