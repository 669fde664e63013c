"""CRM activity log model."""

from enum import Enum

from sqlalchemy import Column, DateTime, String, Text

from dlsolutions.core.database import Base
from dlsolutions.models.shared import UUIDType, generate_uuid, utc_now


class ActivityType(str, Enum):
    EMAIL = "email"
    CALL = "call"
    MEETING = "meeting"
    NOTE = "note"
    TASK = "task"
    DEAL_UPDATE = "deal_update"


class RelatedType(str, Enum):
    CONTACT = "contact"
    DEAL = "deal"
    TASK = "task"


class Activity(Base):
    """Append-only record of something that happened to a contact, deal or task."""

    __tablename__ = "crm_activities"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    type = Column(String(20), nullable=False)
    description = Column(Text, nullable=False)
    related_type = Column(String(20), nullable=False)
    related_id = Column(UUIDType, nullable=False)
    created_by = Column(String(255), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, index=True)
