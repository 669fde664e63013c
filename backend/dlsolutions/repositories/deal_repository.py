"""Repository for CRM deals."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.orm import Session

from dlsolutions.models.contact import Contact
from dlsolutions.models.deal import Deal
from dlsolutions.schemas.crm import DealCreate


class DealRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all_for_owner(self, owner_id: str) -> list[tuple[Deal, Contact | None]]:
        """Return the owner's deals, newest first, each with its contact."""
        rows = (
            self.db.query(Deal, Contact)
            .outerjoin(Contact, Contact.id == Deal.contact_id)
            .filter(Deal.owner_id == owner_id)
            .order_by(Deal.created_at.desc())
            .all()
        )
        return [(deal, contact) for deal, contact in rows]

    def get_by_id(self, deal_id: UUID, owner_id: str) -> Deal | None:
        return (
            self.db.query(Deal).filter(Deal.id == deal_id, Deal.owner_id == owner_id).first()
        )

    def create(self, data: DealCreate, owner_id: str) -> Deal:
        deal = Deal(**data.model_dump(mode="python"), owner_id=owner_id)
        deal.stage = data.stage.value  # type: ignore[assignment]
        self.db.add(deal)
        self.db.commit()
        self.db.refresh(deal)
        return deal
