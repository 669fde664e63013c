"""Pydantic schemas for CRM deals, tasks and activities."""

from datetime import date, datetime
from decimal import Decimal
from typing import Self
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from dlsolutions.models.activity import ActivityType, RelatedType
from dlsolutions.models.deal import DealStage
from dlsolutions.models.task import TaskPriority, TaskStatus


class DealCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    contact_id: UUID
    amount: Decimal = Field(default=Decimal("0"), ge=0)
    currency: str = Field(default="EUR", min_length=3, max_length=3)
    stage: DealStage = DealStage.PROSPECT
    probability: int = Field(default=0, ge=0, le=100)
    expected_close_date: date | None = None
    notes: str | None = None


class DealContact(BaseModel):
    id: UUID
    full_name: str
    email: str

    model_config = {"from_attributes": True}


class DealResponse(BaseModel):
    id: UUID
    owner_id: str
    contact_id: UUID
    title: str
    amount: Decimal
    currency: str
    stage: DealStage
    probability: int
    expected_close_date: date | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime
    contact: DealContact | None = None

    model_config = {"from_attributes": True}


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    due_date: datetime
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.TODO
    assigned_to: str | None = Field(default=None, max_length=255)
    related_type: RelatedType | None = None
    related_id: UUID | None = None

    @model_validator(mode="after")
    def related_pair(self) -> Self:
        if (self.related_type is None) != (self.related_id is None):
            raise ValueError("related_type and related_id must be given together")
        if self.related_type == RelatedType.TASK:
            raise ValueError("a task can only relate to a contact or a deal")
        return self


class TaskResponse(BaseModel):
    id: UUID
    title: str
    description: str | None = None
    due_date: datetime
    priority: TaskPriority
    status: TaskStatus
    assigned_to: str
    created_by: str
    related_type: RelatedType | None = None
    related_id: UUID | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ActivityCreate(BaseModel):
    type: ActivityType
    description: str = Field(..., min_length=1)
    related_type: RelatedType
    related_id: UUID


class ActivityResponse(BaseModel):
    id: UUID
    type: ActivityType
    description: str
    related_type: RelatedType
    related_id: UUID
    created_by: str
    created_at: datetime

    model_config = {"from_attributes": True}
