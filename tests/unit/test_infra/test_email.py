"""Unit tests for email providers."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from movie_catalog.core.settings import EmailSettings
from movie_catalog.infra.email import ConsoleProvider, EmailDeliveryResult, EmailMessage


class TestEmailMessage:
    def test_recipients(self):
        message = EmailMessage(to=["a@example.com", "b@example.com"], subject="Hi", body_text="x")

        assert message.all_recipients == ["a@example.com", "b@example.com"]

    def test_requires_a_recipient(self):
        with pytest.raises(ValidationError):
            EmailMessage(to=[], subject="Hi", body_text="x")


class TestDeliveryResult:
    def test_failure_without_error_gets_placeholder(self):
        result = EmailDeliveryResult(success=False, message_id=None, provider="smtp")

        assert result.error == "Unknown error"


class TestConsoleProvider:
    async def test_send_succeeds_and_is_timed(self):
        provider = ConsoleProvider(EmailSettings())

        result = await provider.send(
            EmailMessage(to=["ana@example.com"], subject="Releasing today", body_text="Hi"),
        )

        assert result.success is True
        assert result.provider == "console"
        assert result.recipients_accepted == ["ana@example.com"]
        assert result.duration_ms is not None
