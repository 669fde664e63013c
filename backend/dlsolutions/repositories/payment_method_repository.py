"""Repository for PaymentMethod rows.

Write methods only flush; the registry service owns the transaction and
commits once per operation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import case, func, update
from sqlalchemy.orm import Session

from dlsolutions.models.payment_method import DEFAULT_HOLDER_NAME, PaymentMethod

if TYPE_CHECKING:
    from dlsolutions.services.card_processor import ProcessorCard


class PaymentMethodRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all_for_user(self, user_id: str) -> list[PaymentMethod]:
        return (
            self.db.query(PaymentMethod)
            .filter(PaymentMethod.user_id == user_id)
            .order_by(PaymentMethod.created_at.desc())
            .all()
        )

    def get_for_user(self, payment_method_id: UUID, user_id: str) -> PaymentMethod | None:
        return (
            self.db.query(PaymentMethod)
            .filter(
                PaymentMethod.id == payment_method_id,
                PaymentMethod.user_id == user_id,
            )
            .first()
        )

    def count_for_user(self, user_id: str) -> int:
        return (
            self.db.query(func.count(PaymentMethod.id))
            .filter(PaymentMethod.user_id == user_id)
            .scalar()
            or 0
        )

    def get_default(self, user_id: str) -> PaymentMethod | None:
        return (
            self.db.query(PaymentMethod)
            .filter(
                PaymentMethod.user_id == user_id,
                PaymentMethod.is_default == True,  # noqa: E712
            )
            .first()
        )

    def get_most_recent(self, user_id: str) -> PaymentMethod | None:
        return (
            self.db.query(PaymentMethod)
            .filter(PaymentMethod.user_id == user_id)
            .order_by(PaymentMethod.created_at.desc())
            .first()
        )

    def create(self, user_id: str, card: ProcessorCard) -> PaymentMethod:
        payment_method = PaymentMethod(
            user_id=user_id,
            stripe_card_id=card.id,
            card_number=card.last4,
            holder_name=card.name or DEFAULT_HOLDER_NAME,
            brand=card.brand,
            expiry=card.expiry,
            is_default=False,
        )
        self.db.add(payment_method)
        self.db.flush()
        return payment_method

    def set_default(self, payment_method_id: UUID, user_id: str) -> int:
        """Flag ``payment_method_id`` as default and clear every sibling.

        Issued as one UPDATE over all of the owner's rows so there is no
        intermediate state with zero or two defaults. Returns the number of
        rows touched.
        """
        result = self.db.execute(
            update(PaymentMethod)
            .where(PaymentMethod.user_id == user_id)
            .values(is_default=case((PaymentMethod.id == payment_method_id, True), else_=False))
            .execution_options(synchronize_session=False)
        )
        self.db.expire_all()
        return result.rowcount  # type: ignore[attr-defined, no-any-return]

    def delete(self, payment_method: PaymentMethod) -> None:
        self.db.delete(payment_method)
        self.db.flush()
