"""Public contact form endpoint."""

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from dlsolutions.core.config import settings
from dlsolutions.core.database import get_db
from dlsolutions.core.rate_limiter import RateLimiter
from dlsolutions.schemas.contact_message import ContactMessageCreate, ContactSubmitResponse
from dlsolutions.services.contact_service import ContactService
from dlsolutions.services.email_service import EmailService, get_email_service

router = APIRouter()

# Module-level limiter for unauthenticated submissions, keyed by client IP
contact_rate_limiter = RateLimiter(
    max_requests=settings.RATE_LIMIT_CONTACT_PER_MINUTE,
    window_seconds=60,
)


def _check_rate_limit(request: Request) -> None:
    """Cap contact submissions per client address."""
    key = request.client.host if request.client else "unknown"
    if not contact_rate_limiter.hit(key):
        raise HTTPException(
            status_code=429,
            detail="Too many messages sent. Please try again later.",
            headers={"Retry-After": str(contact_rate_limiter.retry_after(key))},
        )


@router.post(
    "",
    response_model=ContactSubmitResponse,
    summary="Submit contact form",
    responses={
        400: {"description": "Invalid form data"},
        429: {"description": "Too many submissions"},
    },
)
async def submit_contact(
    data: ContactMessageCreate,
    request: Request,
    db: Session = Depends(get_db),
    email_service: EmailService = Depends(get_email_service),
) -> ContactSubmitResponse:
    """Store the message and send notification and confirmation emails.

    Only well-formed submissions count against the rate limit.
    """
    _check_rate_limit(request)
    service = ContactService(db, email_service)
    message = await service.submit(data)
    return ContactSubmitResponse(message="Message envoyé avec succès", id=message.id)  # type: ignore[arg-type]
