"""CRM operations: contacts, notes, deals, tasks and the activity log."""

import csv
import io
import json
import logging
import math
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dlsolutions.core.errors import NotFoundError, StoreError
from dlsolutions.models.activity import Activity, ActivityType, RelatedType
from dlsolutions.models.contact import Contact, ContactNote
from dlsolutions.models.deal import Deal
from dlsolutions.models.task import Task
from dlsolutions.repositories.activity_repository import ActivityRepository
from dlsolutions.repositories.contact_repository import ContactRepository
from dlsolutions.repositories.deal_repository import DealRepository
from dlsolutions.repositories.task_repository import TaskRepository
from dlsolutions.schemas.contact import ContactFilters, ContactResponse, ContactUpdate
from dlsolutions.schemas.crm import ActivityCreate, DealCreate, TaskCreate

logger = logging.getLogger(__name__)

NOTE_PREVIEW_LENGTH = 100

EXPORT_FIELDS = [
    "id",
    "full_name",
    "email",
    "phone",
    "company",
    "position",
    "status",
    "last_contacted",
    "created_at",
    "updated_at",
]


@dataclass
class SearchResult:
    contacts: list[Contact]
    total: int
    page: int
    total_pages: int


@dataclass
class BulkOutcome:
    succeeded: list[UUID]
    failed: list[UUID]


@dataclass
class ExportFile:
    content: str
    content_type: str
    filename: str


class CRMService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ContactRepository(db)
        self.deals = DealRepository(db)
        self.tasks = TaskRepository(db)
        self.activities = ActivityRepository(db)

    def get_contact(self, contact_id: UUID, owner_id: str) -> Contact:
        contact = self.repo.get_by_id(contact_id, owner_id)
        if contact is None:
            raise NotFoundError("Contact not found")
        return contact

    def search(
        self, owner_id: str, filters: ContactFilters, page: int = 1, limit: int = 10
    ) -> SearchResult:
        total = self.repo.count(owner_id, filters)
        contacts = self.repo.search(owner_id, filters, skip=(page - 1) * limit, limit=limit)
        return SearchResult(
            contacts=contacts,
            total=total,
            page=page,
            total_pages=math.ceil(total / limit),
        )

    def bulk_update(self, owner_id: str, ids: list[UUID], updates: ContactUpdate) -> BulkOutcome:
        """Apply ``updates`` to each id independently.

        A missing contact or a store error on one id marks that id failed
        and leaves the others untouched.
        """
        outcome = BulkOutcome(succeeded=[], failed=[])
        for contact_id in ids:
            try:
                updated = self.repo.update(contact_id, updates, owner_id)
            except SQLAlchemyError:
                self.db.rollback()
                logger.exception("Bulk update failed for contact %s", contact_id)
                updated = None
            if updated is None:
                outcome.failed.append(contact_id)
            else:
                outcome.succeeded.append(contact_id)
        logger.info(
            "Bulk update for %s: %d updated, %d failed",
            owner_id,
            len(outcome.succeeded),
            len(outcome.failed),
        )
        return outcome

    def bulk_delete(self, owner_id: str, ids: list[UUID]) -> BulkOutcome:
        outcome = BulkOutcome(succeeded=[], failed=[])
        for contact_id in ids:
            try:
                deleted = self.repo.delete(contact_id, owner_id)
            except SQLAlchemyError:
                self.db.rollback()
                logger.exception("Bulk delete failed for contact %s", contact_id)
                deleted = False
            if deleted:
                outcome.succeeded.append(contact_id)
            else:
                outcome.failed.append(contact_id)
        logger.info(
            "Bulk delete for %s: %d deleted, %d failed",
            owner_id,
            len(outcome.succeeded),
            len(outcome.failed),
        )
        return outcome

    def export(self, owner_id: str, filters: ContactFilters, fmt: str = "csv") -> ExportFile:
        """Export every contact matching ``filters`` as CSV or JSON."""
        contacts = self.repo.search(owner_id, filters)
        rows = [
            ContactResponse.model_validate(c).model_dump(mode="json") for c in contacts
        ]
        stamp = datetime.now(UTC).strftime("%Y-%m-%d")

        if fmt == "json":
            return ExportFile(
                content=json.dumps(rows, indent=2, ensure_ascii=False),
                content_type="application/json",
                filename=f"contacts_export_{stamp}.json",
            )

        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=EXPORT_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow({k: "" if row.get(k) is None else row[k] for k in EXPORT_FIELDS})
        return ExportFile(
            content=output.getvalue(),
            content_type="text/csv",
            filename=f"contacts_export_{stamp}.csv",
        )

    def list_notes(self, contact_id: UUID, owner_id: str) -> list[ContactNote]:
        contact = self.get_contact(contact_id, owner_id)
        return self.repo.get_notes(contact.id)  # type: ignore[arg-type]

    def add_note(self, contact_id: UUID, owner_id: str, content: str) -> ContactNote:
        """Store a note and log a ``note`` activity for it in the same commit."""
        contact = self.get_contact(contact_id, owner_id)
        try:
            note = self.repo.add_note(contact.id, content, owner_id)  # type: ignore[arg-type]
            self.activities.add(
                type=ActivityType.NOTE.value,
                description=note_activity_description(content),
                related_type=RelatedType.CONTACT.value,
                related_id=contact.id,  # type: ignore[arg-type]
                created_by=owner_id,
            )
            self.db.commit()
            self.db.refresh(note)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to add note to contact %s", contact_id)
            raise StoreError(str(e)) from e
        return note

    def list_deals(self, owner_id: str) -> list[tuple[Deal, Contact | None]]:
        return self.deals.get_all_for_owner(owner_id)

    def create_deal(self, owner_id: str, data: DealCreate) -> Deal:
        contact = self.get_contact(data.contact_id, owner_id)
        deal = self.deals.create(data, owner_id)
        logger.info("Created deal %s for contact %s", deal.id, contact.id)
        return deal

    def list_tasks(self, user_id: str) -> list[Task]:
        return self.tasks.get_assigned_to(user_id)

    def create_task(self, user_id: str, data: TaskCreate) -> Task:
        if data.related_type is not None and data.related_id is not None:
            self._check_related(data.related_type, data.related_id, user_id)
        return self.tasks.create(data, user_id)

    def list_activities(
        self,
        user_id: str,
        related_type: RelatedType | None = None,
        related_id: UUID | None = None,
    ) -> list[Activity]:
        """The caller's activities, newest first.

        The related filter applies only when both halves are given.
        """
        return self.activities.get_all(
            user_id,
            related_type=related_type.value if related_type else None,
            related_id=related_id,
        )

    def log_activity(self, user_id: str, data: ActivityCreate) -> Activity:
        self._check_related(data.related_type, data.related_id, user_id)
        try:
            activity = self.activities.add(
                type=data.type.value,
                description=data.description,
                related_type=data.related_type.value,
                related_id=data.related_id,
                created_by=user_id,
            )
            self.db.commit()
            self.db.refresh(activity)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to log activity for user %s", user_id)
            raise StoreError(str(e)) from e
        return activity

    def _check_related(self, related_type: RelatedType, related_id: UUID, user_id: str) -> None:
        if related_type == RelatedType.CONTACT:
            found = self.repo.get_by_id(related_id, user_id) is not None
        elif related_type == RelatedType.DEAL:
            found = self.deals.get_by_id(related_id, user_id) is not None
        else:
            found = self.tasks.get_by_id(related_id, user_id) is not None
        if not found:
            raise NotFoundError(f"Related {related_type.value} not found")


def note_activity_description(content: str) -> str:
    """``Note ajoutée : `` followed by the first 100 characters of the note."""
    suffix = "..." if len(content) > NOTE_PREVIEW_LENGTH else ""
    return f"Note ajoutée : {content[:NOTE_PREVIEW_LENGTH]}{suffix}"
