"""Console email provider for development.

Logs emails instead of sending them.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from .base import BaseEmailProvider, EmailDeliveryResult

if TYPE_CHECKING:
    from movie_catalog.infra.email.schemas import EmailMessage

logger = logging.getLogger(__name__)


class ConsoleProvider(BaseEmailProvider):
    """Always succeeds; the message is written to the log at INFO."""

    @property
    def provider_name(self) -> str:
        return "console"

    async def _do_send(self, message: EmailMessage) -> EmailDeliveryResult:
        message_id = f"<console-{uuid.uuid4().hex}@localhost>"
        logger.info(
            "Email (console)",
            extra={
                "message_id": message_id,
                "from": message.from_email or self._settings.from_header,
                "to": message.all_recipients,
                "subject": message.subject,
                "body": message.body_text,
            },
        )
        return EmailDeliveryResult.success_result(
            message_id=message_id,
            provider=self.provider_name,
            recipients=message.all_recipients,
        )
