"""SMTP email provider using aiosmtplib."""

from __future__ import annotations

import logging
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr, formatdate, make_msgid
from typing import TYPE_CHECKING

import aiosmtplib

from .base import BaseEmailProvider, EmailDeliveryResult

if TYPE_CHECKING:
    from movie_catalog.core.settings import EmailSettings
    from movie_catalog.infra.email.schemas import EmailMessage

logger = logging.getLogger(__name__)


class SMTPProvider(BaseEmailProvider):
    """Sends over SMTP with optional STARTTLS or implicit TLS.

    Example:
        provider = SMTPProvider(get_email_settings())
        result = await provider.send(EmailMessage(to=["a@b.c"], subject="Hi", body_text="..."))
    """

    def __init__(self, settings: EmailSettings) -> None:
        super().__init__(settings)
        self._host = settings.smtp_host
        self._port = settings.smtp_port
        self._username = settings.smtp_username
        self._password = (
            settings.smtp_password.get_secret_value() if settings.smtp_password else None
        )

    @property
    def provider_name(self) -> str:
        return "smtp"

    async def _do_send(self, message: EmailMessage) -> EmailDeliveryResult:
        mime_message = self._build_mime_message(message)
        message_id = mime_message["Message-ID"]

        try:
            smtp = aiosmtplib.SMTP(
                hostname=self._host,
                port=self._port,
                use_tls=self._settings.use_ssl,
                start_tls=self._settings.use_tls,
                timeout=self._settings.timeout,
            )
            async with smtp:
                if self._username and self._password:
                    await smtp.login(self._username, self._password)
                errors, _response = await smtp.send_message(mime_message)
        except aiosmtplib.SMTPAuthenticationError as e:
            return EmailDeliveryResult.failure_result(
                provider=self.provider_name,
                error=f"SMTP authentication failed: {e}",
                error_code="AUTH_FAILED",
                recipients_rejected=message.all_recipients,
            )
        except aiosmtplib.SMTPRecipientsRefused as e:
            return EmailDeliveryResult.failure_result(
                provider=self.provider_name,
                error=f"All recipients refused: {e}",
                error_code="RECIPIENTS_REFUSED",
                recipients_rejected=message.all_recipients,
            )
        except aiosmtplib.SMTPConnectError as e:
            return EmailDeliveryResult.failure_result(
                provider=self.provider_name,
                error=f"SMTP connection failed: {e}",
                error_code="CONNECTION_ERROR",
            )
        except aiosmtplib.SMTPException as e:
            return EmailDeliveryResult.failure_result(
                provider=self.provider_name,
                error=f"SMTP error: {e}",
                error_code="SMTP_ERROR",
            )

        recipients_accepted = [r for r in message.all_recipients if r not in errors]
        recipients_rejected = list(errors) if errors else []
        if recipients_rejected:
            logger.warning(
                "Some SMTP recipients rejected",
                extra={"message_id": message_id, "rejected": recipients_rejected},
            )

        return EmailDeliveryResult(
            success=len(recipients_accepted) > 0,
            message_id=message_id,
            provider=self.provider_name,
            recipients_accepted=recipients_accepted,
            recipients_rejected=recipients_rejected,
            metadata={"host": self._host, "port": self._port},
        )

    def _build_mime_message(self, message: EmailMessage) -> MIMEMultipart:
        mime_msg = MIMEMultipart("alternative")
        mime_msg["Subject"] = message.subject
        mime_msg["From"] = formataddr(
            (
                message.from_name or self._settings.default_from_name,
                str(message.from_email or self._settings.default_from_email),
            )
        )
        mime_msg["To"] = ", ".join(message.all_recipients)
        mime_msg["Date"] = formatdate(localtime=False)
        mime_msg["Message-ID"] = make_msgid()
        if message.reply_to:
            mime_msg["Reply-To"] = str(message.reply_to)

        mime_msg.attach(MIMEText(message.body_text, "plain", "utf-8"))
        if message.body_html:
            mime_msg.attach(MIMEText(message.body_html, "html", "utf-8"))
        return mime_msg
