"""Tests for EmailService – template rendering, SMTP sending, and no-op behavior."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from dlsolutions.services.email_service import (
    CONTACT_CONFIRMATION_TEXT,
    EmailService,
    render_template,
)


def _make_message(**overrides):  # type: ignore[no-untyped-def]
    defaults = {
        "name": "Marie Nguema",
        "email": "marie@example.com",
        "phone": "+237690000000",
        "service": "cloud",
        "subject": "Migration",
        "message": "Nous voulons migrer nos serveurs.",
    }
    defaults.update(overrides)
    return SimpleNamespace(**defaults)


def _smtp_settings(mock_settings, **overrides):  # type: ignore[no-untyped-def]
    mock_settings.smtp_enabled = True
    mock_settings.SMTP_HOST = "smtp.example.com"
    mock_settings.SMTP_PORT = 465
    mock_settings.SMTP_USERNAME = "user"
    mock_settings.SMTP_PASSWORD = "pass"
    mock_settings.SMTP_FROM_EMAIL = "contact@dlsolutions.cm"
    mock_settings.SMTP_FROM_NAME = "DL Solutions"
    mock_settings.SMTP_USE_TLS = True
    mock_settings.CONTACT_INBOX_EMAIL = "inbox@dlsolutions.cm"
    for key, value in overrides.items():
        setattr(mock_settings, key, value)


class TestRenderTemplate:
    def test_replaces_placeholders(self) -> None:
        assert render_template("Bonjour {{name}}", {"name": "Marie"}) == "Bonjour Marie"

    def test_replaces_every_occurrence(self) -> None:
        assert render_template("{{a}}-{{a}}", {"a": "x"}) == "x-x"

    def test_unknown_placeholder_left_alone(self) -> None:
        assert render_template("{{missing}}", {"name": "Marie"}) == "{{missing}}"

    def test_confirmation_template(self) -> None:
        text = render_template(
            CONTACT_CONFIRMATION_TEXT,
            {"name": "Marie", "service": "web", "subject": "Site", "message": "Bonjour"},
        )
        assert text.startswith("Cher(e) Marie,")
        assert "{{" not in text


class TestSendEmailNoOp:
    """When SMTP is not configured, send_email should log and return True."""

    @pytest.mark.asyncio
    async def test_returns_true_when_smtp_unconfigured(self) -> None:
        mock_send = AsyncMock()
        with (
            patch("dlsolutions.services.email_service.settings") as mock_settings,
            patch("aiosmtplib.send", mock_send),
        ):
            mock_settings.smtp_enabled = False
            result = await EmailService().send_email(
                to="test@example.com", subject="Test", text_body="Hello"
            )
        assert result is True
        mock_send.assert_not_called()


class TestSendEmailSmtp:
    @pytest.mark.asyncio
    async def test_sends_email_via_smtp(self) -> None:
        mock_send = AsyncMock()
        with (
            patch("dlsolutions.services.email_service.settings") as mock_settings,
            patch("aiosmtplib.send", mock_send),
        ):
            _smtp_settings(mock_settings)
            result = await EmailService().send_email(
                to="test@example.com",
                subject="Test Subject",
                text_body="Hello",
                reply_to="reply@example.com",
            )

        assert result is True
        mock_send.assert_called_once()
        msg = mock_send.call_args[0][0]
        assert msg["To"] == "test@example.com"
        assert msg["From"] == "DL Solutions <contact@dlsolutions.cm>"
        assert msg["Reply-To"] == "reply@example.com"
        call_kwargs = mock_send.call_args[1]
        assert call_kwargs["hostname"] == "smtp.example.com"
        assert call_kwargs["port"] == 465
        assert call_kwargs["username"] == "user"
        assert call_kwargs["use_tls"] is True

    @pytest.mark.asyncio
    async def test_empty_credentials_passed_as_none(self) -> None:
        mock_send = AsyncMock()
        with (
            patch("dlsolutions.services.email_service.settings") as mock_settings,
            patch("aiosmtplib.send", mock_send),
        ):
            _smtp_settings(mock_settings, SMTP_USERNAME="", SMTP_PASSWORD="")
            await EmailService().send_email(to="a@example.com", subject="S", text_body="B")

        call_kwargs = mock_send.call_args[1]
        assert call_kwargs["username"] is None
        assert call_kwargs["password"] is None

    @pytest.mark.asyncio
    async def test_smtp_failure_propagates(self) -> None:
        with (
            patch("dlsolutions.services.email_service.settings") as mock_settings,
            patch("aiosmtplib.send", AsyncMock(side_effect=OSError("refused"))),
        ):
            _smtp_settings(mock_settings)
            with pytest.raises(OSError):
                await EmailService().send_email(to="a@example.com", subject="S", text_body="B")


class TestContactEmails:
    @pytest.mark.asyncio
    async def test_notification_goes_to_inbox(self) -> None:
        mock_send = AsyncMock()
        with (
            patch("dlsolutions.services.email_service.settings") as mock_settings,
            patch("aiosmtplib.send", mock_send),
        ):
            _smtp_settings(mock_settings)
            await EmailService().send_contact_notification(_make_message())

        msg = mock_send.call_args[0][0]
        assert msg["To"] == "inbox@dlsolutions.cm"
        assert msg["Subject"] == "Nouveau message de contact - Migration"
        assert msg["Reply-To"] == "marie@example.com"
        body = msg.get_content()
        assert "Téléphone : +237690000000" in body
        assert "Service : cloud" in body

    @pytest.mark.asyncio
    async def test_confirmation_goes_to_sender(self) -> None:
        mock_send = AsyncMock()
        with (
            patch("dlsolutions.services.email_service.settings") as mock_settings,
            patch("aiosmtplib.send", mock_send),
        ):
            _smtp_settings(mock_settings)
            await EmailService().send_contact_confirmation(_make_message())

        msg = mock_send.call_args[0][0]
        assert msg["To"] == "marie@example.com"
        assert msg["Subject"] == "Confirmation de votre message - DL Solutions"
        assert "Cher(e) Marie Nguema," in msg.get_content()
