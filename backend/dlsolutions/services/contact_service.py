"""Contact form intake and admin inbox operations."""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dlsolutions.core.errors import NotFoundError, StoreError, ValidationError
from dlsolutions.models.contact_message import ContactMessage, MessageStatus
from dlsolutions.repositories.contact_message_repository import ContactMessageRepository
from dlsolutions.schemas.contact_message import ContactMessageCreate
from dlsolutions.services.email_service import EmailService

logger = logging.getLogger(__name__)


class ContactService:
    def __init__(self, db: Session, email_service: EmailService):
        self.db = db
        self.repo = ContactMessageRepository(db)
        self.email_service = email_service

    async def submit(self, data: ContactMessageCreate) -> ContactMessage:
        """Store a contact message, then notify the team and the sender.

        Mail failures are logged; the stored message is kept either way.
        """
        try:
            message = self.repo.create(data)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to store contact message from %s", data.email)
            raise StoreError(str(e)) from e

        logger.info("Contact message %s received (service=%s)", message.id, message.service)

        try:
            await self.email_service.send_contact_notification(message)
            await self.email_service.send_contact_confirmation(message)
        except Exception:
            logger.exception("Failed to send emails for contact message %s", message.id)

        return message

    def list_messages(self) -> list[ContactMessage]:
        return self.repo.get_all()

    def update_status(self, message_id: UUID, status: str) -> ContactMessage:
        allowed = {s.value for s in MessageStatus}
        if status not in allowed:
            raise ValidationError("Invalid status")
        message = self.repo.update_status(message_id, status)
        if message is None:
            raise NotFoundError("Message not found")
        return message
