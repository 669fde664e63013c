"""Email service for contact form notifications via SMTP."""

from __future__ import annotations

import logging
from email.message import EmailMessage
from typing import TYPE_CHECKING

from dlsolutions.core.config import settings

if TYPE_CHECKING:
    from dlsolutions.models.contact_message import ContactMessage

logger = logging.getLogger(__name__)

CONTACT_NOTIFICATION_SUBJECT = "Nouveau message de contact - {{subject}}"
CONTACT_NOTIFICATION_TEXT = """Nouveau message de contact reçu :

Nom : {{name}}
Email : {{email}}
Téléphone : {{phone}}
Service : {{service}}
Sujet : {{subject}}
Message : {{message}}

Pour répondre à ce message, utilisez l'adresse email : {{email}}
"""

CONTACT_CONFIRMATION_SUBJECT = "Confirmation de votre message - DL Solutions"
CONTACT_CONFIRMATION_TEXT = """Cher(e) {{name}},

Nous avons bien reçu votre message et nous vous en remercions.
Notre équipe vous répondra dans les plus brefs délais.

Récapitulatif de votre message :
Service : {{service}}
Sujet : {{subject}}
Message : {{message}}

Pour toute question supplémentaire, n'hésitez pas à nous contacter.

Cordialement,
L'équipe DL Solutions
"""


def render_template(template: str, values: dict[str, str]) -> str:
    """Replace every ``{{key}}`` placeholder with its value."""
    rendered = template
    for key, value in values.items():
        rendered = rendered.replace("{{" + key + "}}", value)
    return rendered


def _message_values(message: ContactMessage) -> dict[str, str]:
    return {
        "name": str(message.name),
        "email": str(message.email),
        "phone": str(message.phone),
        "service": str(message.service),
        "subject": str(message.subject),
        "message": str(message.message),
    }


class EmailService:
    """Service for sending plain-text emails via SMTP."""

    async def send_email(
        self,
        to: str,
        subject: str,
        text_body: str,
        reply_to: str | None = None,
    ) -> bool:
        """Send an email via SMTP.

        Args:
            to: Recipient email address.
            subject: Email subject line.
            text_body: Plain text content of the email.
            reply_to: Optional Reply-To address.

        Returns:
            True if sent successfully (or no-op when SMTP unconfigured).
        """
        if not settings.smtp_enabled:
            logger.info("SMTP not configured, skipping email to %s: %s", to, subject)
            return True

        import aiosmtplib

        msg = EmailMessage()
        msg["From"] = f"{settings.SMTP_FROM_NAME} <{settings.SMTP_FROM_EMAIL}>"
        msg["To"] = to
        msg["Subject"] = subject
        if reply_to:
            msg["Reply-To"] = reply_to
        msg.set_content(text_body)

        await aiosmtplib.send(
            msg,
            hostname=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            username=settings.SMTP_USERNAME or None,
            password=settings.SMTP_PASSWORD or None,
            use_tls=settings.SMTP_USE_TLS,
        )
        logger.info("Email sent to %s: %s", to, subject)
        return True

    async def send_contact_notification(self, message: ContactMessage) -> bool:
        """Notify the team inbox about a new contact message."""
        values = _message_values(message)
        return await self.send_email(
            to=settings.CONTACT_INBOX_EMAIL,
            subject=render_template(CONTACT_NOTIFICATION_SUBJECT, values),
            text_body=render_template(CONTACT_NOTIFICATION_TEXT, values),
            reply_to=str(message.email),
        )

    async def send_contact_confirmation(self, message: ContactMessage) -> bool:
        """Confirm receipt to the person who filled in the form."""
        values = _message_values(message)
        return await self.send_email(
            to=str(message.email),
            subject=render_template(CONTACT_CONFIRMATION_SUBJECT, values),
            text_body=render_template(CONTACT_CONFIRMATION_TEXT, values),
        )


def get_email_service() -> EmailService:
    return EmailService()
