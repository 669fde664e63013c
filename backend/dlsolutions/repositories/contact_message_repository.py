"""Repository for ContactMessage CRUD operations."""

from uuid import UUID

from sqlalchemy.orm import Session

from dlsolutions.models.contact_message import ContactMessage
from dlsolutions.schemas.contact_message import ContactMessageCreate


class ContactMessageRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> list[ContactMessage]:
        return self.db.query(ContactMessage).order_by(ContactMessage.created_at.desc()).all()

    def get_by_id(self, message_id: UUID) -> ContactMessage | None:
        return self.db.query(ContactMessage).filter(ContactMessage.id == message_id).first()

    def create(self, data: ContactMessageCreate) -> ContactMessage:
        message = ContactMessage(
            name=data.name,
            email=data.email,
            phone=data.phone,
            subject=data.subject,
            message=data.message,
            service=data.service.value,
        )
        self.db.add(message)
        self.db.commit()
        self.db.refresh(message)
        return message

    def update_status(self, message_id: UUID, status: str) -> ContactMessage | None:
        message = self.get_by_id(message_id)
        if not message:
            return None
        message.status = status  # type: ignore[assignment]
        self.db.commit()
        self.db.refresh(message)
        return message
