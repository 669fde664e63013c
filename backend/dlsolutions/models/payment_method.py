"""PaymentMethod model for cards saved by an account holder."""

from sqlalchemy import Boolean, Column, DateTime, String

from dlsolutions.core.database import Base
from dlsolutions.models.shared import UUIDType, generate_uuid, utc_now

DEFAULT_HOLDER_NAME = "Sans nom"


class PaymentMethod(Base):
    """A card attached to the account holder's processor customer.

    At most one row per ``user_id`` carries ``is_default``; the registry
    service keeps exactly one once the owner has any card.
    """

    __tablename__ = "payment_methods"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    user_id = Column(String(255), nullable=False, index=True)

    # Processor source handle (card_xxx / src_xxx)
    stripe_card_id = Column(String(255), nullable=False)

    # Masked display data
    card_number = Column(String(4), nullable=False)  # last 4 digits
    holder_name = Column(String(255), nullable=False, default=DEFAULT_HOLDER_NAME)
    brand = Column(String(50), nullable=True)
    expiry = Column(String(5), nullable=False)  # M/YY

    is_default = Column(Boolean, nullable=False, default=False)

    # Python-side default keeps microsecond precision for newest-first ordering
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, index=True)
