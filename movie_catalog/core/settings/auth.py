"""Authentication collaborator settings."""

from __future__ import annotations

from pydantic import AnyUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """Where and how bearer tokens are validated.

    Environment variables use AUTH_ prefix.
    Example: AUTH_SERVICE_URL="http://identity:9497"

    Tokens are issued by an external identity service; this service only
    asks it who a token belongs to.
    """

    service_url: AnyUrl | None = Field(
        default=None,
        alias="AUTH_SERVICE_URL",
        description="Base URL of the identity service",
    )
    token_validation_endpoint: str = Field(
        default="/api/auth/token",
        description="Path that resolves a token to its user",
    )
    request_timeout: float = Field(
        default=10.0,
        ge=1.0,
        le=60.0,
        description="Timeout in seconds for identity service calls",
    )
    verify_ssl: bool = Field(default=True)

    dev_mode: bool = Field(
        default=False,
        description="Accept 'dev-<user_id>' tokens without calling the identity service",
    )

    model_config = SettingsConfigDict(
        env_prefix="AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        env_ignore_empty=True,
    )
