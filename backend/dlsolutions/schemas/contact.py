"""Pydantic schemas for CRM contacts and notes."""

from datetime import datetime
from typing import Any, Literal
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from dlsolutions.models.contact import ContactStatus


class ContactCreate(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone: str | None = Field(default=None, max_length=50)
    company: str | None = Field(default=None, max_length=255)
    position: str | None = Field(default=None, max_length=255)
    status: ContactStatus = ContactStatus.LEAD
    tags: list[str] = Field(default_factory=list)
    notes: str | None = None
    last_contacted: datetime | None = None


class ContactUpdate(BaseModel):
    full_name: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=50)
    company: str | None = Field(default=None, max_length=255)
    position: str | None = Field(default=None, max_length=255)
    status: ContactStatus | None = None
    tags: list[str] | None = None
    notes: str | None = None
    last_contacted: datetime | None = None

    @field_validator("full_name", "email", "status", "tags", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        # These may be omitted but never cleared
        if v is None:
            raise ValueError("field cannot be null")
        return v


class ContactResponse(BaseModel):
    id: UUID
    owner_id: str
    full_name: str
    email: str
    phone: str | None = None
    company: str | None = None
    position: str | None = None
    status: ContactStatus
    tags: list[str]
    notes: str | None = None
    last_contacted: datetime | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ContactFilters(BaseModel):
    search: str | None = None
    status: str | None = None
    company: str | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None
    sort_by: str | None = None
    sort_order: Literal["asc", "desc"] | None = None


class ContactPage(BaseModel):
    contacts: list[ContactResponse]
    total: int
    page: int
    total_pages: int


class BulkUpdateRequest(BaseModel):
    ids: list[UUID] = Field(..., min_length=1)
    updates: ContactUpdate


class BulkDeleteRequest(BaseModel):
    ids: list[UUID] = Field(..., min_length=1)


class BulkResult(BaseModel):
    success: bool = True
    message: str
    succeeded: list[UUID]
    failed: list[UUID]


class NoteCreate(BaseModel):
    content: str = Field(..., min_length=1)


class NoteResponse(BaseModel):
    id: UUID
    contact_id: UUID
    content: str
    created_by: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
