"""Repository for CRM contacts and their notes."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, or_
from sqlalchemy.orm import Query, Session

from dlsolutions.core.sorting import apply_order_by
from dlsolutions.models.contact import Contact, ContactNote
from dlsolutions.models.deal import Deal
from dlsolutions.schemas.contact import ContactCreate, ContactFilters, ContactUpdate


class ContactRepository:
    def __init__(self, db: Session):
        self.db = db

    def _filtered(self, owner_id: str, filters: ContactFilters) -> Query:  # type: ignore[type-arg]
        query = self.db.query(Contact).filter(Contact.owner_id == owner_id)
        if filters.search:
            pattern = f"%{filters.search.lower()}%"
            query = query.filter(
                or_(
                    func.lower(Contact.full_name).like(pattern),
                    func.lower(Contact.email).like(pattern),
                    func.lower(Contact.company).like(pattern),
                )
            )
        if filters.status and filters.status != "all":
            query = query.filter(Contact.status == filters.status)
        if filters.company:
            query = query.filter(func.lower(Contact.company).like(f"%{filters.company.lower()}%"))
        if filters.date_from or filters.date_to:
            query = query.filter(Contact.last_contacted.isnot(None))
            if filters.date_from:
                query = query.filter(Contact.last_contacted >= filters.date_from)
            if filters.date_to:
                query = query.filter(Contact.last_contacted <= filters.date_to)
        return query

    def search(
        self,
        owner_id: str,
        filters: ContactFilters,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[Contact]:
        query = apply_order_by(
            self._filtered(owner_id, filters), Contact, filters.sort_by, filters.sort_order
        )
        query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def count(self, owner_id: str, filters: ContactFilters) -> int:
        return self._filtered(owner_id, filters).count()

    def get_by_id(self, contact_id: UUID, owner_id: str) -> Contact | None:
        return (
            self.db.query(Contact)
            .filter(Contact.id == contact_id, Contact.owner_id == owner_id)
            .first()
        )

    def create(self, data: ContactCreate, owner_id: str) -> Contact:
        contact = Contact(**data.model_dump(mode="python"), owner_id=owner_id)
        contact.status = data.status.value  # type: ignore[assignment]
        self.db.add(contact)
        self.db.commit()
        self.db.refresh(contact)
        return contact

    def update(self, contact_id: UUID, data: ContactUpdate, owner_id: str) -> Contact | None:
        contact = self.get_by_id(contact_id, owner_id)
        if not contact:
            return None
        for key, value in data.model_dump(exclude_unset=True).items():
            if key == "status" and value is not None:
                value = value.value
            setattr(contact, key, value)
        self.db.commit()
        self.db.refresh(contact)
        return contact

    def delete(self, contact_id: UUID, owner_id: str) -> bool:
        contact = self.get_by_id(contact_id, owner_id)
        if not contact:
            return False
        self.db.query(ContactNote).filter(ContactNote.contact_id == contact.id).delete()
        self.db.query(Deal).filter(Deal.contact_id == contact.id).delete()
        self.db.delete(contact)
        self.db.commit()
        return True

    def get_notes(self, contact_id: UUID) -> list[ContactNote]:
        return (
            self.db.query(ContactNote)
            .filter(ContactNote.contact_id == contact_id)
            .order_by(ContactNote.created_at.desc())
            .all()
        )

    def add_note(self, contact_id: UUID, content: str, created_by: str) -> ContactNote:
        """Stage a note. The caller commits."""
        note = ContactNote(contact_id=contact_id, content=content, created_by=created_by)
        self.db.add(note)
        self.db.flush()
        return note
