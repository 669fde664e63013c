"""Admin inbox over contact form messages."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from dlsolutions.core.auth import get_current_admin
from dlsolutions.core.database import get_db
from dlsolutions.schemas.contact_message import (
    ContactMessageEnvelope,
    ContactMessageListResponse,
    ContactMessageResponse,
    ContactMessageStatusUpdate,
)
from dlsolutions.services.contact_service import ContactService
from dlsolutions.services.email_service import EmailService, get_email_service

router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get(
    "",
    response_model=ContactMessageListResponse,
    summary="List contact messages",
    responses={401: {"description": "Admin access required"}},
)
async def list_messages(
    db: Session = Depends(get_db),
    email_service: EmailService = Depends(get_email_service),
) -> ContactMessageListResponse:
    """List every contact message, newest first."""
    messages = ContactService(db, email_service).list_messages()
    return ContactMessageListResponse(
        messages=[ContactMessageResponse.model_validate(m) for m in messages]
    )


@router.patch(
    "/{message_id}",
    response_model=ContactMessageEnvelope,
    summary="Update contact message status",
    responses={
        400: {"description": "Invalid status"},
        401: {"description": "Admin access required"},
        404: {"description": "Message not found"},
    },
)
async def update_message_status(
    message_id: UUID,
    data: ContactMessageStatusUpdate,
    db: Session = Depends(get_db),
    email_service: EmailService = Depends(get_email_service),
) -> ContactMessageEnvelope:
    message = ContactService(db, email_service).update_status(message_id, data.status)
    return ContactMessageEnvelope(message=ContactMessageResponse.model_validate(message))
