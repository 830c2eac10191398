"""Outgoing email.

Usage:
    from movie_catalog.infra.email import EmailMessage, get_email_provider

    provider = get_email_provider()
    result = await provider.send(EmailMessage(to=[user.email], subject="...", body_text="..."))
"""

from __future__ import annotations

from functools import lru_cache

from movie_catalog.core.settings import get_email_settings
from movie_catalog.infra.email.providers import (
    BaseEmailProvider,
    ConsoleProvider,
    EmailDeliveryResult,
    SMTPProvider,
)
from movie_catalog.infra.email.schemas import EmailMessage


@lru_cache(maxsize=1)
def get_email_provider() -> BaseEmailProvider:
    """Provider selected by ``EMAIL_BACKEND``."""
    settings = get_email_settings()
    if settings.backend == "smtp":
        return SMTPProvider(settings)
    return ConsoleProvider(settings)


__all__ = [
    "BaseEmailProvider",
    "ConsoleProvider",
    "EmailDeliveryResult",
    "EmailMessage",
    "SMTPProvider",
    "get_email_provider",
]
