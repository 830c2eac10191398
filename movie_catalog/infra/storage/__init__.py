"""Object storage for movie media.

Usage:
    from movie_catalog.infra.storage import get_storage_backend

    backend = get_storage_backend()
    if backend is not None:
        await backend.delete_object(movie.image_key)
"""

from __future__ import annotations

from movie_catalog.core.settings import get_storage_settings
from movie_catalog.infra.storage.exceptions import StorageError, StorageNotConfiguredError
from movie_catalog.infra.storage.protocol import StorageBackend
from movie_catalog.infra.storage.s3 import S3StorageBackend

_backend: S3StorageBackend | None = None


def get_storage_backend() -> StorageBackend | None:
    """Return the started backend, or None when storage is disabled."""
    return _backend


async def start_storage() -> StorageBackend | None:
    """Create and start the S3 backend if storage is enabled."""
    global _backend
    settings = get_storage_settings()
    if not settings.is_configured:
        return None
    if _backend is None:
        _backend = S3StorageBackend(settings)
        await _backend.startup()
    return _backend


async def stop_storage() -> None:
    global _backend
    if _backend is not None:
        await _backend.shutdown()
        _backend = None


__all__ = [
    "S3StorageBackend",
    "StorageBackend",
    "StorageError",
    "StorageNotConfiguredError",
    "get_storage_backend",
    "start_storage",
    "stop_storage",
]
