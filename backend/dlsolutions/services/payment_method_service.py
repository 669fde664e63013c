"""Payment method registry.

Owns an account holder's saved cards and keeps the single-default
invariant: once the owner has any card, exactly one of them is default.
"""

from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from dlsolutions.core.errors import NotFoundError, ProcessorError, StoreError, ValidationError
from dlsolutions.models.customer_link import CustomerLink
from dlsolutions.models.payment_method import PaymentMethod
from dlsolutions.repositories.customer_link_repository import CustomerLinkRepository
from dlsolutions.repositories.payment_method_repository import PaymentMethodRepository
from dlsolutions.services.card_processor import CardProcessor

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Payment method not found"


def parse_payment_method_id(payment_method_id: UUID | str) -> UUID:
    """Ids are opaque to callers: anything that is not a UUID cannot exist."""
    if isinstance(payment_method_id, UUID):
        return payment_method_id
    try:
        return UUID(str(payment_method_id))
    except ValueError:
        raise NotFoundError(NOT_FOUND_MESSAGE) from None


class PaymentMethodRegistry:
    """Create, list, delete and set-default operations for saved cards.

    Store writes that touch the default flag run under a row lock on the
    owner's ``CustomerLink``. Processor calls are made outside that lock.
    """

    def __init__(self, db: Session, processor: CardProcessor):
        self.db = db
        self.processor = processor
        self.repo = PaymentMethodRepository(db)
        self.link_repo = CustomerLinkRepository(db)

    def list(self, user_id: str) -> list[PaymentMethod]:
        """Return the owner's cards, newest first."""
        try:
            return self.repo.get_all_for_user(user_id)
        except SQLAlchemyError as e:
            logger.exception("Failed to list payment methods for user %s", user_id)
            raise StoreError(str(e)) from e

    def _lock_owner(self, user_id: str) -> CustomerLink | None:
        return self.link_repo.get_by_user_id(user_id, for_update=True)

    def _resolve_customer(self, user_id: str, email: str | None) -> str:
        """Return the owner's processor customer id, creating it on first use."""
        try:
            link = self.link_repo.get_by_user_id(user_id)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to load customer link for user %s", user_id)
            raise StoreError(str(e)) from e
        if link is not None:
            return str(link.stripe_customer_id)

        try:
            customer_id = self.processor.create_customer(user_id, email)
        except ProcessorError:
            self.db.rollback()
            raise

        try:
            link = self.link_repo.create(user_id, customer_id)
        except IntegrityError:
            # Another request linked this owner first; use its customer
            self.db.rollback()
            winner = self.link_repo.get_by_user_id(user_id)
            if winner is None:
                raise StoreError("Customer link vanished after conflict") from None
            logger.warning(
                "Customer link for user %s created concurrently; processor customer %s unused",
                user_id,
                customer_id,
            )
            return str(winner.stripe_customer_id)
        except SQLAlchemyError as e:
            self.db.rollback()
            # The processor customer is left behind without a local link
            logger.exception(
                "Failed to persist customer link for user %s (processor customer %s orphaned)",
                user_id,
                customer_id,
            )
            raise StoreError(str(e)) from e
        return str(link.stripe_customer_id)

    def add(self, user_id: str, token: str | None, email: str | None = None) -> PaymentMethod:
        """Attach a tokenized card and store it.

        The first card an owner adds becomes the default.
        """
        if not token or not token.strip():
            raise ValidationError("Card token is required")

        customer_id = self._resolve_customer(user_id, email)
        # End the read transaction before the processor round trip
        self.db.commit()

        try:
            card = self.processor.attach_source(customer_id, token.strip())
        except ProcessorError:
            self.db.rollback()
            raise

        try:
            self._lock_owner(user_id)
            payment_method = self.repo.create(user_id, card)
            if self.repo.count_for_user(user_id) == 1:
                payment_method.is_default = True  # type: ignore[assignment]
            self.db.commit()
            self.db.refresh(payment_method)
        except SQLAlchemyError as e:
            self.db.rollback()
            # Source stays attached on the processor side
            logger.exception(
                "Failed to store payment method for user %s (processor source %s left attached)",
                user_id,
                card.id,
            )
            raise StoreError(str(e)) from e

        logger.info(
            "Added payment method %s for user %s (default=%s)",
            payment_method.id,
            user_id,
            payment_method.is_default,
        )
        return payment_method

    def set_default(self, user_id: str, payment_method_id: UUID | str) -> PaymentMethod:
        """Make ``payment_method_id`` the owner's only default card."""
        method_id = parse_payment_method_id(payment_method_id)
        try:
            self._lock_owner(user_id)
            payment_method = self.repo.get_for_user(method_id, user_id)
            if payment_method is None:
                self.db.rollback()
                raise NotFoundError(NOT_FOUND_MESSAGE)
            current = self.repo.get_default(user_id)
            if current is None or current.id != payment_method.id:
                self.repo.set_default(method_id, user_id)
            self.db.commit()
            self.db.refresh(payment_method)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(
                "Failed to set default payment method %s for user %s", method_id, user_id
            )
            raise StoreError(str(e)) from e

        logger.info("Payment method %s is now default for user %s", method_id, user_id)
        return payment_method

    def delete(self, user_id: str, payment_method_id: UUID | str) -> None:
        """Remove a card, promoting the newest remaining card if it was default.

        The processor source is detached after the store commit, best effort.
        """
        method_id = parse_payment_method_id(payment_method_id)
        try:
            link = self._lock_owner(user_id)
            payment_method = self.repo.get_for_user(method_id, user_id)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to load payment method %s", method_id)
            raise StoreError(str(e)) from e
        if payment_method is None:
            self.db.rollback()
            raise NotFoundError(NOT_FOUND_MESSAGE)

        was_default = bool(payment_method.is_default)
        source_id = str(payment_method.stripe_card_id)
        customer_id = str(link.stripe_customer_id) if link is not None else None

        try:
            self.repo.delete(payment_method)
            if was_default:
                replacement = self.repo.get_most_recent(user_id)
                if replacement is not None:
                    replacement.is_default = True  # type: ignore[assignment]
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to delete payment method %s for user %s", method_id, user_id)
            raise StoreError(str(e)) from e

        logger.info("Deleted payment method %s for user %s", method_id, user_id)

        if customer_id is None:
            return
        try:
            self.processor.detach_source(customer_id, source_id)
        except ProcessorError as e:
            # The processor may keep the source; local state is authoritative
            logger.warning(
                "Could not detach source %s from customer %s: %s", source_id, customer_id, e
            )
