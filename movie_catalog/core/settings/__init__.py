"""Pydantic Settings v2 configuration, one module per concern.

Every settings class reads environment variables under its own prefix
(APP_, DB_, LOG_, PAGINATION_, STORAGE_, EMAIL_, AUTH_, NOTIFICATION_),
falls back to a local .env file, and is frozen once loaded.

Import settings via the cached loaders:
    from movie_catalog.core.settings import get_app_settings
"""

from __future__ import annotations

from .app import AppSettings
from .auth import AuthSettings
from .email import EmailSettings
from .loader import (
    clear_all_caches,
    get_app_settings,
    get_auth_settings,
    get_db_settings,
    get_email_settings,
    get_logging_settings,
    get_notification_settings,
    get_pagination_settings,
    get_storage_settings,
)
from .logging_ import LoggingSettings
from .notifications import NotificationSettings
from .pagination import PaginationSettings
from .postgres import PostgresSettings
from .storage import StorageSettings

__all__ = [
    "AppSettings",
    "AuthSettings",
    "EmailSettings",
    "LoggingSettings",
    "NotificationSettings",
    "PaginationSettings",
    "PostgresSettings",
    "StorageSettings",
    "clear_all_caches",
    "get_app_settings",
    "get_auth_settings",
    "get_db_settings",
    "get_email_settings",
    "get_logging_settings",
    "get_notification_settings",
    "get_pagination_settings",
    "get_storage_settings",
]
