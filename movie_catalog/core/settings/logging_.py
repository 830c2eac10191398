"""Logging configuration settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Structured logging configuration.

    Environment variables use LOG_ prefix.
    Example: LOG_LEVEL=DEBUG, LOG_JSON=false
    """

    level: LogLevel = Field(default="INFO", description="Root log level")
    json_logs: bool = Field(
        default=True,
        alias="LOG_JSON",
        description="Emit JSON Lines instead of human-readable text",
    )
    console_enabled: bool = Field(default=True, description="Log to stderr")
    log_file: str | None = Field(
        default=None,
        max_length=500,
        description="Rotating log file path (None disables file logging)",
    )
    max_bytes: int = Field(default=10_485_760, ge=1024, le=1_073_741_824)
    backup_count: int = Field(default=5, ge=0, le=100)
    include_uvicorn: bool = Field(default=True, description="Route uvicorn logs through root")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.upper()
        return v

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    @property
    def level_int(self) -> int:
        import logging

        return getattr(logging, self.level.upper(), logging.INFO)
