"""Repository for CustomerLink rows."""

from sqlalchemy.orm import Session

from dlsolutions.models.customer_link import CustomerLink


class CustomerLinkRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_user_id(self, user_id: str, for_update: bool = False) -> CustomerLink | None:
        """Return the owner's link.

        With ``for_update`` the row is locked until the surrounding
        transaction ends, which serializes payment-method writes per owner
        on backends that support row locks.
        """
        query = self.db.query(CustomerLink).filter(CustomerLink.user_id == user_id)
        if for_update:
            query = query.with_for_update()
        return query.first()

    def create(self, user_id: str, stripe_customer_id: str) -> CustomerLink:
        link = CustomerLink(user_id=user_id, stripe_customer_id=stripe_customer_id)
        self.db.add(link)
        self.db.commit()
        self.db.refresh(link)
        return link
