"""Token information returned by the identity service."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AuthToken(BaseModel):
    """Who a bearer token belongs to.

    Attributes:
        token: The validated token
        user_id: Id of the catalog user the token was issued for
        email: User email, when the identity service reports it
        expires_at: Expiry, when reported
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    token: str = Field(..., min_length=1)
    user_id: int = Field(..., ge=1)
    email: str | None = None
    expires_at: datetime | None = None


__all__ = ["AuthToken"]
