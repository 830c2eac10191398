"""S3-compatible object storage settings."""

from __future__ import annotations

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Object storage for movie posters and backdrops.

    Environment variables use STORAGE_ prefix.
    Example: STORAGE_ENABLED=true, STORAGE_BUCKET=movie-media

    Works with AWS S3 and S3-compatible services (MinIO, LocalStack).
    """

    enabled: bool = Field(
        default=False,
        description="Enable S3-compatible storage (disabled by default)",
    )
    endpoint: str | None = Field(
        default=None,
        description="S3-compatible endpoint URL. None for AWS S3.",
    )
    bucket: str = Field(default="movie-media", min_length=3, max_length=63)
    region: str = Field(default="us-east-1")
    access_key: SecretStr | None = Field(default=None)
    secret_key: SecretStr | None = Field(default=None)
    use_ssl: bool = Field(default=True)
    timeout: int = Field(default=30, ge=1, le=300, description="Connect/read timeout in seconds")
    max_retries: int = Field(default=3, ge=0, le=10)
    presigned_url_expiry_seconds: int = Field(
        default=3600,
        ge=60,
        le=604800,
        description="Lifetime of presigned upload URLs",
    )
    allowed_folders: list[str] = Field(
        default_factory=lambda: ["images", "backdrops"],
        description="Key prefixes clients may upload into",
    )

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    @model_validator(mode="after")
    def _credentials_paired(self) -> StorageSettings:
        if (self.access_key is None) != (self.secret_key is None):
            msg = "access_key and secret_key must be provided together"
            raise ValueError(msg)
        return self

    @property
    def is_configured(self) -> bool:
        return self.enabled and bool(self.bucket)
