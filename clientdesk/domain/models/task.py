"""
Task domain model.
Represents a unit of work nested under a project.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional
from enum import Enum

from clientdesk.domain.models.base import BaseEntity


class TaskStatus(str, Enum):
    """Task status."""
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    ON_HOLD = "on_hold"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    """Task priority levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(kw_only=True)
class Task(BaseEntity):
    """Task entity. `assigned_to` references a team member by id."""

    project_id: str
    name: str
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.OPEN
    priority: TaskPriority = TaskPriority.MEDIUM
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    estimated_hours: Optional[float] = None
    actual_hours: Optional[float] = None
    assigned_to: Optional[str] = None
