"""Email message schema."""

from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field


class EmailMessage(BaseModel):
    """A plain-text email, optionally with an HTML alternative."""

    to: list[EmailStr] = Field(..., min_length=1)
    subject: str = Field(..., min_length=1, max_length=255)
    body_text: str
    body_html: str | None = None
    from_email: EmailStr | None = None
    from_name: str | None = None
    reply_to: EmailStr | None = None

    @property
    def all_recipients(self) -> list[str]:
        return [str(addr) for addr in self.to]


__all__ = ["EmailMessage"]
