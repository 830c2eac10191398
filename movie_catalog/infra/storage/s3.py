"""S3-compatible storage backend using aioboto3."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import aioboto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from movie_catalog.infra.storage.exceptions import StorageError, StorageNotConfiguredError

if TYPE_CHECKING:
    from movie_catalog.core.settings import StorageSettings

logger = logging.getLogger(__name__)


class S3StorageBackend:
    """Storage backend for AWS S3, MinIO and other S3-compatible services.

    The client is opened by ``startup()`` and closed by ``shutdown()``;
    the application lifespan calls both.

    Example:
        backend = S3StorageBackend(get_storage_settings())
        await backend.startup()
        url = await backend.generate_presigned_upload_url("images/poster.jpg", "image/jpeg")
        await backend.shutdown()
    """

    def __init__(self, settings: StorageSettings) -> None:
        if not settings.is_configured:
            msg = "S3 backend not configured. Set STORAGE_ENABLED=true and STORAGE_BUCKET."
            raise StorageNotConfiguredError(msg)

        self.settings = settings
        self._session = aioboto3.Session()
        self._client: Any = None
        self._client_context: Any = None

    @property
    def backend_name(self) -> str:
        return "s3"

    async def startup(self) -> None:
        """Open the S3 client."""
        if self._client is not None:
            return

        logger.info(
            "Initializing S3 backend",
            extra={
                "bucket": self.settings.bucket,
                "endpoint": self.settings.endpoint,
                "region": self.settings.region,
            },
        )
        boto_config = Config(
            retries={"max_attempts": self.settings.max_retries, "mode": "standard"},
            connect_timeout=self.settings.timeout,
            read_timeout=self.settings.timeout,
        )
        self._client_context = self._session.client(
            "s3",
            **self._get_client_config(),
            config=boto_config,
        )
        self._client = await self._client_context.__aenter__()

    async def shutdown(self) -> None:
        if self._client_context is None:
            return

        try:
            await self._client_context.__aexit__(None, None, None)
        except (BotoCoreError, ClientError) as e:
            logger.warning("Error closing S3 client", extra={"error": str(e)})
        finally:
            self._client = None
            self._client_context = None
        logger.info("S3 backend shutdown complete")

    def _get_client_config(self) -> dict[str, Any]:
        config: dict[str, Any] = {
            "region_name": self.settings.region,
            "use_ssl": self.settings.use_ssl,
        }
        if self.settings.endpoint:
            config["endpoint_url"] = self.settings.endpoint
        if self.settings.access_key and self.settings.secret_key:
            config["aws_access_key_id"] = self.settings.access_key.get_secret_value()
            config["aws_secret_access_key"] = self.settings.secret_key.get_secret_value()
        return config

    def _ensure_client(self) -> Any:
        if self._client is None:
            msg = "S3 backend not started"
            raise StorageError(msg, code="STORAGE_NOT_STARTED")
        return self._client

    async def generate_presigned_upload_url(
        self,
        key: str,
        content_type: str | None = None,
        expires_in: int = 3600,
    ) -> str:
        """Presigned PUT URL for ``key``.

        Raises:
            StorageError: If URL generation fails
        """
        client = self._ensure_client()
        params: dict[str, Any] = {"Bucket": self.settings.bucket, "Key": key}
        if content_type:
            params["ContentType"] = content_type

        try:
            url = await client.generate_presigned_url(
                "put_object",
                Params=params,
                ExpiresIn=expires_in,
            )
        except (BotoCoreError, ClientError) as e:
            logger.exception("Failed to generate presigned upload URL", extra={"key": key})
            raise StorageError(
                f"Failed to generate upload URL for {key}: {e}",
                code="STORAGE_PRESIGNED_URL_ERROR",
                metadata={"key": key, "bucket": self.settings.bucket},
            ) from e

        logger.info(
            "Generated presigned upload URL",
            extra={"key": key, "content_type": content_type, "expires_in": expires_in},
        )
        return str(url)

    async def delete_object(self, key: str) -> bool:
        """Delete ``key`` from the configured bucket.

        Raises:
            StorageError: If deletion fails
        """
        client = self._ensure_client()
        try:
            await client.delete_object(Bucket=self.settings.bucket, Key=key)
        except (BotoCoreError, ClientError) as e:
            raise StorageError(
                f"Failed to delete {key}: {e}",
                code="STORAGE_DELETE_ERROR",
                metadata={"key": key, "bucket": self.settings.bucket},
            ) from e

        logger.info("Object deleted from S3", extra={"key": key, "bucket": self.settings.bucket})
        return True


__all__ = ["S3StorageBackend"]
