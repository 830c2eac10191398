"""Email delivery settings."""

from __future__ import annotations

from typing import Literal

from pydantic import EmailStr, Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmailSettings(BaseSettings):
    """Outgoing email configuration.

    Environment variables use EMAIL_ prefix.
    Example: EMAIL_BACKEND=smtp, EMAIL_SMTP_HOST=mail.example.com
    """

    enabled: bool = Field(default=True, description="Send email at all")
    backend: Literal["smtp", "console"] = Field(
        default="console",
        description="console logs messages instead of sending them",
    )
    smtp_host: str = Field(default="localhost")
    smtp_port: int = Field(default=587, ge=1, le=65535)
    smtp_username: str | None = Field(default=None)
    smtp_password: SecretStr | None = Field(default=None)
    use_tls: bool = Field(default=True, description="STARTTLS after connecting")
    use_ssl: bool = Field(default=False, description="Implicit TLS on connect")
    timeout: float = Field(default=30.0, ge=1.0, le=300.0)
    default_from_email: EmailStr = Field(default="noreply@example.com")
    default_from_name: str = Field(default="Movie Catalog")

    model_config = SettingsConfigDict(
        env_prefix="EMAIL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    @model_validator(mode="after")
    def validate_tls_ssl_exclusive(self) -> EmailSettings:
        if self.use_tls and self.use_ssl:
            msg = "use_tls and use_ssl are mutually exclusive"
            raise ValueError(msg)
        return self

    @model_validator(mode="after")
    def validate_smtp_auth(self) -> EmailSettings:
        if (self.smtp_username is None) != (self.smtp_password is None):
            msg = "Both smtp_username and smtp_password must be provided together"
            raise ValueError(msg)
        return self

    @property
    def requires_auth(self) -> bool:
        return self.smtp_username is not None and self.smtp_password is not None

    @property
    def from_header(self) -> str:
        return f"{self.default_from_name} <{self.default_from_email}>"
