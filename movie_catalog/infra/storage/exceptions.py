"""Storage exceptions."""

from __future__ import annotations

from typing import Any


class StorageError(Exception):
    """An object storage operation failed.

    Attributes:
        code: Stable error code for logs
        metadata: Key, bucket and backend error details
    """

    def __init__(
        self,
        message: str,
        *,
        code: str = "STORAGE_ERROR",
        metadata: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.metadata = metadata or {}


class StorageNotConfiguredError(StorageError):
    def __init__(self, message: str = "Object storage is not configured") -> None:
        super().__init__(message, code="STORAGE_NOT_CONFIGURED")


__all__ = ["StorageError", "StorageNotConfiguredError"]
