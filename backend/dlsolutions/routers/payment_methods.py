"""Payment methods API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from dlsolutions.core.auth import get_current_identity
from dlsolutions.core.database import get_db
from dlsolutions.models.payment_method import PaymentMethod
from dlsolutions.schemas.payment_method import (
    PaymentMethodCreate,
    PaymentMethodResponse,
    SuccessResponse,
)
from dlsolutions.services.card_processor import CardProcessor, get_card_processor
from dlsolutions.services.identity import Identity
from dlsolutions.services.payment_method_service import PaymentMethodRegistry

router = APIRouter()

UNAUTHORIZED = {401: {"description": "Unauthorized – missing or invalid bearer token"}}
NOT_FOUND = {404: {"description": "Payment method not found"}}


def get_registry(
    db: Session = Depends(get_db),
    processor: CardProcessor = Depends(get_card_processor),
) -> PaymentMethodRegistry:
    return PaymentMethodRegistry(db, processor)


@router.get(
    "",
    response_model=list[PaymentMethodResponse],
    summary="List payment methods",
    responses=UNAUTHORIZED,
)
async def list_payment_methods(
    registry: PaymentMethodRegistry = Depends(get_registry),
    identity: Identity = Depends(get_current_identity),
) -> list[PaymentMethod]:
    """List the caller's saved cards, newest first."""
    return registry.list(identity.user_id)


@router.post(
    "",
    response_model=PaymentMethodResponse,
    summary="Add payment method",
    responses={400: {"description": "Missing card token"}, **UNAUTHORIZED},
)
async def add_payment_method(
    data: PaymentMethodCreate,
    registry: PaymentMethodRegistry = Depends(get_registry),
    identity: Identity = Depends(get_current_identity),
) -> PaymentMethod:
    """Attach a tokenized card. The caller's first card becomes the default."""
    return registry.add(identity.user_id, data.token, email=identity.email)


@router.delete(
    "/{payment_method_id}",
    response_model=SuccessResponse,
    summary="Delete payment method",
    responses={**UNAUTHORIZED, **NOT_FOUND},
)
async def delete_payment_method(
    payment_method_id: str,
    registry: PaymentMethodRegistry = Depends(get_registry),
    identity: Identity = Depends(get_current_identity),
) -> SuccessResponse:
    """Delete a card; if it was the default, the newest remaining card takes over."""
    registry.delete(identity.user_id, payment_method_id)
    return SuccessResponse()


@router.put(
    "/{payment_method_id}/default",
    response_model=SuccessResponse,
    summary="Set default payment method",
    responses={**UNAUTHORIZED, **NOT_FOUND},
)
async def set_default_payment_method(
    payment_method_id: str,
    registry: PaymentMethodRegistry = Depends(get_registry),
    identity: Identity = Depends(get_current_identity),
) -> SuccessResponse:
    """Make a card the caller's default."""
    registry.set_default(identity.user_id, payment_method_id)
    return SuccessResponse()
