"""CRM contacts API endpoints."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from dlsolutions.core.auth import get_current_user
from dlsolutions.core.database import get_db
from dlsolutions.core.errors import NotFoundError
from dlsolutions.models.contact import Contact, ContactNote
from dlsolutions.repositories.contact_repository import ContactRepository
from dlsolutions.schemas.contact import (
    BulkDeleteRequest,
    BulkResult,
    BulkUpdateRequest,
    ContactCreate,
    ContactFilters,
    ContactPage,
    ContactResponse,
    ContactUpdate,
    NoteCreate,
    NoteResponse,
)
from dlsolutions.services.crm_service import CRMService

router = APIRouter()

NOT_FOUND = {404: {"description": "Contact not found"}}


def contact_filters(
    search: str | None = None,
    status: str | None = None,
    company: str | None = None,
    date_from: datetime | None = None,
    date_to: datetime | None = None,
    sort_by: str | None = None,
    sort_order: Literal["asc", "desc"] | None = None,
) -> ContactFilters:
    return ContactFilters(
        search=search,
        status=status,
        company=company,
        date_from=date_from,
        date_to=date_to,
        sort_by=sort_by,
        sort_order=sort_order,
    )


@router.get("", response_model=ContactPage, summary="Search contacts")
async def search_contacts(
    filters: ContactFilters = Depends(contact_filters),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_current_user),
) -> ContactPage:
    """Filter, sort and paginate the caller's contacts."""
    result = CRMService(db).search(owner_id, filters, page=page, limit=limit)
    return ContactPage(
        contacts=[ContactResponse.model_validate(c) for c in result.contacts],
        total=result.total,
        page=result.page,
        total_pages=result.total_pages,
    )


@router.post("", response_model=ContactResponse, status_code=201, summary="Create contact")
async def create_contact(
    data: ContactCreate,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_current_user),
) -> Contact:
    return ContactRepository(db).create(data, owner_id)


@router.post("/bulk-update", response_model=BulkResult, summary="Bulk update contacts")
async def bulk_update_contacts(
    data: BulkUpdateRequest,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_current_user),
) -> BulkResult:
    outcome = CRMService(db).bulk_update(owner_id, data.ids, data.updates)
    return BulkResult(
        message=f"{len(outcome.succeeded)} contact(s) updated, {len(outcome.failed)} failed",
        succeeded=outcome.succeeded,
        failed=outcome.failed,
    )


@router.post("/bulk-delete", response_model=BulkResult, summary="Bulk delete contacts")
async def bulk_delete_contacts(
    data: BulkDeleteRequest,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_current_user),
) -> BulkResult:
    outcome = CRMService(db).bulk_delete(owner_id, data.ids)
    return BulkResult(
        message=f"{len(outcome.succeeded)} contact(s) deleted, {len(outcome.failed)} failed",
        succeeded=outcome.succeeded,
        failed=outcome.failed,
    )


@router.get("/export", summary="Export contacts")
async def export_contacts(
    filters: ContactFilters = Depends(contact_filters),
    format: Literal["csv", "json"] = Query(default="csv"),
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_current_user),
) -> Response:
    """Download the caller's filtered contacts as CSV or JSON."""
    export = CRMService(db).export(owner_id, filters, fmt=format)
    return Response(
        content=export.content,
        media_type=export.content_type,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )


@router.get(
    "/{contact_id}", response_model=ContactResponse, summary="Get contact", responses=NOT_FOUND
)
async def get_contact(
    contact_id: UUID,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_current_user),
) -> Contact:
    return CRMService(db).get_contact(contact_id, owner_id)


@router.patch(
    "/{contact_id}",
    response_model=ContactResponse,
    summary="Update contact",
    responses=NOT_FOUND,
)
async def update_contact(
    contact_id: UUID,
    data: ContactUpdate,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_current_user),
) -> Contact:
    contact = ContactRepository(db).update(contact_id, data, owner_id)
    if contact is None:
        raise NotFoundError("Contact not found")
    return contact


@router.delete(
    "/{contact_id}", status_code=204, summary="Delete contact", responses=NOT_FOUND
)
async def delete_contact(
    contact_id: UUID,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_current_user),
) -> None:
    if not ContactRepository(db).delete(contact_id, owner_id):
        raise NotFoundError("Contact not found")


@router.get(
    "/{contact_id}/notes",
    response_model=list[NoteResponse],
    summary="List contact notes",
    responses=NOT_FOUND,
)
async def list_notes(
    contact_id: UUID,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_current_user),
) -> list[ContactNote]:
    return CRMService(db).list_notes(contact_id, owner_id)


@router.post(
    "/{contact_id}/notes",
    response_model=NoteResponse,
    status_code=201,
    summary="Add contact note",
    responses=NOT_FOUND,
)
async def add_note(
    contact_id: UUID,
    data: NoteCreate,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_current_user),
) -> ContactNote:
    return CRMService(db).add_note(contact_id, owner_id, data.content)
