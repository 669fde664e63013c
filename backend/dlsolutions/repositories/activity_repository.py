"""Repository for the CRM activity log."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.orm import Session

from dlsolutions.models.activity import Activity


class ActivityRepository:
    def __init__(self, db: Session):
        self.db = db

    def add(
        self,
        *,
        type: str,
        description: str,
        related_type: str,
        related_id: UUID,
        created_by: str,
    ) -> Activity:
        """Stage an activity row. The caller commits."""
        activity = Activity(
            type=type,
            description=description,
            related_type=related_type,
            related_id=related_id,
            created_by=created_by,
        )
        self.db.add(activity)
        self.db.flush()
        return activity

    def get_all(
        self,
        created_by: str,
        related_type: str | None = None,
        related_id: UUID | None = None,
    ) -> list[Activity]:
        query = self.db.query(Activity).filter(Activity.created_by == created_by)
        if related_type is not None and related_id is not None:
            query = query.filter(
                Activity.related_type == related_type,
                Activity.related_id == related_id,
            )
        return query.order_by(Activity.created_at.desc()).all()
