"""Storage dependency."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from movie_catalog.core.exceptions import ServiceUnavailableException
from movie_catalog.infra.storage import StorageBackend, get_storage_backend


def get_optional_storage() -> StorageBackend | None:
    return get_storage_backend()


def get_storage() -> StorageBackend:
    """Started storage backend.

    Raises:
        ServiceUnavailableException: Storage is disabled
    """
    backend = get_storage_backend()
    if backend is None:
        raise ServiceUnavailableException(
            detail="Object storage is not configured",
            type="storage-not-configured",
        )
    return backend


OptionalStorageDep = Annotated[StorageBackend | None, Depends(get_optional_storage)]
StorageDep = Annotated[StorageBackend, Depends(get_storage)]


__all__ = ["OptionalStorageDep", "StorageDep", "get_optional_storage", "get_storage"]
