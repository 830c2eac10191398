"""Email providers."""

from __future__ import annotations

from .base import BaseEmailProvider, EmailDeliveryResult
from .console import ConsoleProvider
from .smtp import SMTPProvider

__all__ = ["BaseEmailProvider", "ConsoleProvider", "EmailDeliveryResult", "SMTPProvider"]
