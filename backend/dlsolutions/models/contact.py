"""CRM contact and note models."""

from enum import Enum

from sqlalchemy import JSON, Column, DateTime, ForeignKey, String, Text

from dlsolutions.core.database import Base
from dlsolutions.models.shared import UUIDType, generate_uuid, utc_now


class ContactStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    LEAD = "lead"
    CUSTOMER = "customer"
    ARCHIVED = "archived"


class Contact(Base):
    """A CRM contact owned by one account holder."""

    __tablename__ = "crm_contacts"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    owner_id = Column(String(255), nullable=False, index=True)

    full_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=True)
    company = Column(String(255), nullable=True)
    position = Column(String(255), nullable=True)
    status = Column(String(20), nullable=False, default=ContactStatus.LEAD.value)
    tags = Column(JSON, nullable=False, default=list)
    notes = Column(Text, nullable=True)
    last_contacted = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)


class ContactNote(Base):
    __tablename__ = "crm_notes"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    contact_id = Column(
        UUIDType,
        ForeignKey("crm_contacts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content = Column(Text, nullable=False)
    created_by = Column(String(255), nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)
