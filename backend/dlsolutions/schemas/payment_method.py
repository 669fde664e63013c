"""Pydantic schemas for PaymentMethod."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class PaymentMethodCreate(BaseModel):
    token: str = Field(..., description="Card token produced by client-side tokenization")

    @field_validator("token")
    @classmethod
    def token_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("token must not be empty")
        return value


class PaymentMethodResponse(BaseModel):
    id: UUID
    user_id: str
    stripe_card_id: str
    card_number: str
    holder_name: str
    brand: str | None = None
    expiry: str
    is_default: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class SuccessResponse(BaseModel):
    success: bool = True
