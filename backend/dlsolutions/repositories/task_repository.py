"""Repository for CRM tasks."""

from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.orm import Session

from dlsolutions.models.task import Task
from dlsolutions.schemas.crm import TaskCreate


class TaskRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_assigned_to(self, user_id: str) -> list[Task]:
        """Tasks assigned to ``user_id``, soonest due first."""
        return (
            self.db.query(Task)
            .filter(Task.assigned_to == user_id)
            .order_by(Task.due_date.asc())
            .all()
        )

    def get_by_id(self, task_id: UUID, user_id: str) -> Task | None:
        """A task is visible to its creator and its assignee."""
        return (
            self.db.query(Task)
            .filter(
                Task.id == task_id,
                or_(Task.created_by == user_id, Task.assigned_to == user_id),
            )
            .first()
        )

    def create(self, data: TaskCreate, created_by: str) -> Task:
        task = Task(
            title=data.title,
            description=data.description,
            due_date=data.due_date,
            priority=data.priority.value,
            status=data.status.value,
            assigned_to=data.assigned_to or created_by,
            created_by=created_by,
            related_type=data.related_type.value if data.related_type else None,
            related_id=data.related_id,
        )
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)
        return task
