"""CRM deals, tasks and activity log API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from dlsolutions.core.auth import get_current_user
from dlsolutions.core.database import get_db
from dlsolutions.models.activity import Activity, RelatedType
from dlsolutions.models.task import Task
from dlsolutions.schemas.crm import (
    ActivityCreate,
    ActivityResponse,
    DealContact,
    DealCreate,
    DealResponse,
    TaskCreate,
    TaskResponse,
)
from dlsolutions.services.crm_service import CRMService

router = APIRouter()


@router.get("/deals", response_model=list[DealResponse], summary="List deals")
async def list_deals(
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_current_user),
) -> list[DealResponse]:
    """The caller's deals, newest first, with a summary of each deal's contact."""
    return [
        DealResponse.model_validate(deal).model_copy(
            update={"contact": DealContact.model_validate(contact) if contact else None}
        )
        for deal, contact in CRMService(db).list_deals(owner_id)
    ]


@router.post(
    "/deals",
    response_model=DealResponse,
    status_code=201,
    summary="Create deal",
    responses={404: {"description": "Contact not found"}},
)
async def create_deal(
    data: DealCreate,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_current_user),
) -> DealResponse:
    service = CRMService(db)
    deal = service.create_deal(owner_id, data)
    contact = service.get_contact(data.contact_id, owner_id)
    return DealResponse.model_validate(deal).model_copy(
        update={"contact": DealContact.model_validate(contact)}
    )


@router.get("/tasks", response_model=list[TaskResponse], summary="List tasks")
async def list_tasks(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user),
) -> list[Task]:
    """Tasks assigned to the caller, soonest due first."""
    return CRMService(db).list_tasks(user_id)


@router.post("/tasks", response_model=TaskResponse, status_code=201, summary="Create task")
async def create_task(
    data: TaskCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user),
) -> Task:
    return CRMService(db).create_task(user_id, data)


@router.get("/activities", response_model=list[ActivityResponse], summary="List activities")
async def list_activities(
    related_type: RelatedType | None = None,
    related_id: UUID | None = None,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user),
) -> list[Activity]:
    return CRMService(db).list_activities(user_id, related_type, related_id)


@router.post(
    "/activities", response_model=ActivityResponse, status_code=201, summary="Log activity"
)
async def log_activity(
    data: ActivityCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user),
) -> Activity:
    return CRMService(db).log_activity(user_id, data)
