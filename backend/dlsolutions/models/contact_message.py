"""ContactMessage model for website contact form submissions."""

from enum import Enum

from sqlalchemy import Column, DateTime, String, Text

from dlsolutions.core.database import Base
from dlsolutions.models.shared import UUIDType, generate_uuid, utc_now


class ServiceCategory(str, Enum):
    WEB = "web"
    CLOUD = "cloud"
    CONSULTING = "consulting"
    EQUIPMENT = "equipment"
    OTHER = "other"


class MessageStatus(str, Enum):
    NEW = "new"
    READ = "read"
    REPLIED = "replied"
    ARCHIVED = "archived"


class ContactMessage(Base):
    __tablename__ = "contact_messages"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    service = Column(String(20), nullable=False)
    status = Column(String(20), nullable=False, default=MessageStatus.NEW.value)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, index=True)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now
    )
