"""
Task DTOs for the application layer.
"""

from typing import Optional
from datetime import date

from .base_dto import ResponseDTO
from clientdesk.domain.models.task import Task, TaskStatus, TaskPriority


class TaskResponseDTO(ResponseDTO):
    """DTO for task responses."""

    project_id: str
    name: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    estimated_hours: Optional[float] = None
    actual_hours: Optional[float] = None
    assigned_to: Optional[str] = None

    @classmethod
    def from_domain(cls, task: Task) -> "TaskResponseDTO":
        return cls(
            id=task.id,
            created_at=task.created_at,
            updated_at=task.updated_at,
            project_id=task.project_id,
            name=task.name,
            description=task.description,
            status=task.status,
            priority=task.priority,
            start_date=task.start_date,
            end_date=task.end_date,
            estimated_hours=task.estimated_hours,
            actual_hours=task.actual_hours,
            assigned_to=task.assigned_to,
        )
