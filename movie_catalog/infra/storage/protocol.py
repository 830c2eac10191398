"""Storage backend protocol.

Movie media (posters, backdrops) lives in an object store. The service
layer only needs two operations: hand a client a URL to upload to, and
remove an object when its movie is deleted.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StorageBackend(Protocol):
    """Object storage operations used by the catalog.

    Implementations:
        - S3StorageBackend: AWS S3 and S3-compatible services via aioboto3
        - tests provide an in-memory double
    """

    @property
    def backend_name(self) -> str: ...

    async def generate_presigned_upload_url(
        self,
        key: str,
        content_type: str | None = None,
        expires_in: int = 3600,
    ) -> str:
        """Return a URL the client can PUT the object body to.

        Raises:
            StorageError: If the URL cannot be generated
        """
        ...

    async def delete_object(self, key: str) -> bool:
        """Delete ``key`` from the bucket.

        Raises:
            StorageError: If the deletion fails
        """
        ...


__all__ = ["StorageBackend"]
