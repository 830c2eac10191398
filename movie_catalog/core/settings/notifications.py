"""Release notification settings."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NotificationSettings(BaseSettings):
    """Environment variables use NOTIFICATION_ prefix.

    Example: NOTIFICATION_DEV_MODE=true
    """

    enabled: bool = Field(default=True, description="Schedule release reminders")
    dev_mode: bool = Field(
        default=False,
        description="Send the reminder immediately on creation instead of on release day",
    )
    batch_size: int = Field(
        default=100,
        ge=1,
        le=10000,
        description="Maximum reminders sent per notify run",
    )

    model_config = SettingsConfigDict(
        env_prefix="NOTIFICATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )
