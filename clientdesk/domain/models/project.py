"""
Project domain model.
A project belongs to one client and carries an optional budget and date range.
"""

from dataclasses import dataclass, field, fields
from datetime import date
from typing import Optional, List
from enum import Enum

from clientdesk.domain.models.base import BaseEntity
from clientdesk.domain.models.client import DEFAULT_CURRENCY
from clientdesk.domain.models.task import Task


class ProjectStatus(str, Enum):
    """Project status."""
    COMPLETED = "completed"
    NON_COMPLETED = "non_completed"


@dataclass(kw_only=True)
class Project(BaseEntity):
    """Project entity."""

    client_id: str
    name: str
    description: Optional[str] = None
    budget: Optional[float] = None
    currency: str = DEFAULT_CURRENCY
    status: ProjectStatus = ProjectStatus.NON_COMPLETED
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @property
    def has_budget(self) -> bool:
        """A project counts toward budget statistics only with both a currency and a budget."""
        return bool(self.currency) and self.budget is not None


@dataclass(kw_only=True)
class ProjectWithTasks(Project):
    """Read projection of a project and its non-archived tasks."""

    tasks: List[Task] = field(default_factory=list)

    @classmethod
    def from_project(cls, project: Project, tasks: List[Task]) -> "ProjectWithTasks":
        values = {f.name: getattr(project, f.name) for f in fields(Project)}
        return cls(tasks=list(tasks), **values)
