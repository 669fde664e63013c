"""Card processor abstraction.

The registry never sees raw card numbers: the client tokenizes the card
and the processor turns that token into a source attached to a customer.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from dlsolutions.core.config import settings
from dlsolutions.core.errors import ProcessorError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessorCard:
    """Masked card data returned when a source is attached."""

    id: str
    brand: str | None
    last4: str
    exp_month: int
    exp_year: int
    name: str | None = None

    @property
    def expiry(self) -> str:
        """Expiry as ``M/YY``."""
        return f"{self.exp_month}/{str(self.exp_year)[-2:]}"


class CardProcessor(ABC):
    """Abstract base class for card processors."""

    @abstractmethod
    def create_customer(self, user_id: str, email: str | None = None) -> str:
        """Create a customer record and return its processor id."""
        pass  # pragma: no cover

    @abstractmethod
    def attach_source(self, customer_id: str, token: str) -> ProcessorCard:
        """Attach a tokenized card to the customer."""
        pass  # pragma: no cover

    @abstractmethod
    def detach_source(self, customer_id: str, source_id: str) -> None:
        """Remove a source from the customer."""
        pass  # pragma: no cover


class StripeCardProcessor(CardProcessor):
    """Stripe implementation backed by customer sources."""

    def __init__(self, api_key: str | None = None, api_version: str | None = None):
        self.api_key = api_key or settings.stripe_api_key
        self.api_version = api_version or settings.stripe_api_version
        self._stripe: Any = None

    @property
    def stripe(self) -> Any:
        """Lazy-load stripe module."""
        if self._stripe is None:
            import stripe

            stripe.api_key = self.api_key
            stripe.api_version = self.api_version
            self._stripe = stripe
        return self._stripe

    def create_customer(self, user_id: str, email: str | None = None) -> str:
        params: dict[str, Any] = {"metadata": {"user_id": user_id}}
        if email:
            params["email"] = email
        try:
            customer = self.stripe.Customer.create(**params)
        except self.stripe.StripeError as e:
            logger.exception("Stripe customer creation failed for user %s", user_id)
            raise ProcessorError(str(e)) from e
        return str(customer.id)

    def attach_source(self, customer_id: str, token: str) -> ProcessorCard:
        try:
            card = self.stripe.Customer.create_source(customer_id, source=token)
        except self.stripe.StripeError as e:
            logger.exception("Stripe source attach failed for customer %s", customer_id)
            raise ProcessorError(str(e)) from e
        return card_from_stripe(card)

    def detach_source(self, customer_id: str, source_id: str) -> None:
        try:
            self.stripe.Customer.delete_source(customer_id, source_id)
        except self.stripe.StripeError as e:
            raise ProcessorError(str(e)) from e


def card_from_stripe(card: Any) -> ProcessorCard:
    """Narrow a Stripe card object (or plain dict) to ``ProcessorCard``."""
    try:
        return ProcessorCard(
            id=str(card["id"]),
            brand=card.get("brand"),
            last4=str(card["last4"]),
            exp_month=int(card["exp_month"]),
            exp_year=int(card["exp_year"]),
            name=card.get("name") or None,
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ProcessorError(f"Unexpected card payload: {e}") from e


def get_card_processor() -> CardProcessor:
    """Dependency returning the configured card processor."""
    return StripeCardProcessor()
