"""Pydantic schemas for contact form messages."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from dlsolutions.models.contact_message import MessageStatus, ServiceCategory


class ContactMessageCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=255)
    email: EmailStr
    phone: str = Field(..., min_length=8, max_length=50)
    subject: str = Field(..., min_length=5, max_length=255)
    message: str = Field(..., min_length=10)
    service: ServiceCategory


class ContactMessageStatusUpdate(BaseModel):
    status: str


class ContactMessageResponse(BaseModel):
    id: UUID
    name: str
    email: str
    phone: str
    subject: str
    message: str
    service: str
    status: MessageStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ContactSubmitResponse(BaseModel):
    message: str
    id: UUID


class ContactMessageListResponse(BaseModel):
    messages: list[ContactMessageResponse]


class ContactMessageEnvelope(BaseModel):
    message: ContactMessageResponse
