"""CustomerLink model mapping an account holder to a processor customer."""

from sqlalchemy import Column, DateTime, String

from dlsolutions.core.database import Base
from dlsolutions.models.shared import UUIDType, generate_uuid, utc_now


class CustomerLink(Base):
    """One row per account holder, created on the first card addition."""

    __tablename__ = "customer_links"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    user_id = Column(String(255), nullable=False, unique=True, index=True)
    stripe_customer_id = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
