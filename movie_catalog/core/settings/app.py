"""Application settings for FastAPI configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["development", "staging", "production", "test"]


class AppSettings(BaseSettings):
    """FastAPI application settings.

    Environment variables use APP_ prefix.
    Example: APP_DEBUG=true, APP_API_PREFIX=/api/v1
    """

    service_name: str = Field(
        default="movie-catalog",
        min_length=1,
        max_length=100,
        pattern=r"^[a-z0-9]+(-[a-z0-9]+)*$",
        description="Service name used in logs",
    )
    title: str = Field(default="Movie Catalog API", min_length=1, max_length=200)
    description: str = Field(
        default="Browse, filter and manage a catalog of movies",
        description="API description (supports Markdown)",
    )
    version: str = Field(
        default="1.0.0",
        pattern=r"^\d+\.\d+\.\d+(-[a-zA-Z0-9]+)?$",
        description="API version (semver format)",
    )
    environment: Environment = Field(default="development")
    api_prefix: str = Field(
        default="/api/v1",
        pattern=r"^/.*$",
        description="Base URL prefix for API routes",
    )

    debug: bool = Field(default=False, description="Enable debug mode")
    docs_url: str | None = Field(default="/docs", description="Swagger UI path")
    openapi_url: str | None = Field(default="/openapi.json", description="OpenAPI schema path")
    disable_docs: bool = Field(default=False, description="Disable all API documentation")

    host: str = Field(default="0.0.0.0", min_length=1, description="Server bind host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    cors_origins: list[str] = Field(default_factory=list, description="Allowed CORS origins")

    create_schema_on_startup: bool = Field(
        default=False,
        description="Create missing tables at startup (development convenience)",
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def get_docs_url(self) -> str | None:
        return None if self.disable_docs else self.docs_url

    def get_openapi_url(self) -> str | None:
        return None if self.disable_docs else self.openapi_url
