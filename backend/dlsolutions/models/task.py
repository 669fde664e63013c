"""CRM task model."""

from enum import Enum

from sqlalchemy import Column, DateTime, String, Text

from dlsolutions.core.database import Base
from dlsolutions.models.shared import UUIDType, generate_uuid, utc_now


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    CANCELLED = "cancelled"


class Task(Base):
    __tablename__ = "crm_tasks"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    created_by = Column(String(255), nullable=False)
    assigned_to = Column(String(255), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    due_date = Column(DateTime(timezone=True), nullable=False, index=True)
    priority = Column(String(20), nullable=False, default=TaskPriority.MEDIUM.value)
    status = Column(String(20), nullable=False, default=TaskStatus.TODO.value)
    # Optional link to a contact or deal
    related_type = Column(String(20), nullable=True)
    related_id = Column(UUIDType, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)
