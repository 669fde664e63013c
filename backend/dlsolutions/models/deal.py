"""CRM deal model."""

from enum import Enum

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, Numeric, String, Text

from dlsolutions.core.database import Base
from dlsolutions.models.shared import UUIDType, generate_uuid, utc_now


class DealStage(str, Enum):
    PROSPECT = "prospect"
    QUALIFIED = "qualified"
    PROPOSAL = "proposal"
    NEGOTIATION = "negotiation"
    CLOSED_WON = "closed_won"
    CLOSED_LOST = "closed_lost"


class Deal(Base):
    """A sales opportunity tied to one of the owner's contacts."""

    __tablename__ = "crm_deals"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    owner_id = Column(String(255), nullable=False, index=True)
    contact_id = Column(
        UUIDType,
        ForeignKey("crm_contacts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title = Column(String(255), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False, default=0)
    currency = Column(String(3), nullable=False, default="EUR")
    stage = Column(String(20), nullable=False, default=DealStage.PROSPECT.value)
    probability = Column(Integer, nullable=False, default=0)
    expected_close_date = Column(Date, nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)
