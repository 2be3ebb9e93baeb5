"""
Project DTOs for the application layer.
"""

from typing import Optional, List, Any, Dict
from datetime import date, datetime
from pydantic import Field, field_validator, ValidationInfo

from .base_dto import RequestDTO, ResponseDTO
from .task_dto import TaskResponseDTO
from clientdesk.domain.models.client import DEFAULT_CURRENCY
from clientdesk.domain.models.project import Project, ProjectStatus, ProjectWithTasks
from clientdesk.infrastructure.validation.validators import (
    DataValidator, BusinessValidator, blank_to_none
)


def _date_part(value: Any) -> Any:
    """Accept full timestamps for date fields by keeping the date part."""
    value = blank_to_none(value)
    if isinstance(value, str) and "T" in value:
        return value.split("T", 1)[0]
    if isinstance(value, datetime):
        return value.date()
    return value


# Request DTOs
class ProjectInputDTO(RequestDTO):
    """DTO for project update requests; the base of project creation."""

    name: str = Field(description="Project name")
    description: Optional[str] = Field(default=None, description="Project description")
    budget: Optional[float] = Field(default=None, description="Budget, positive when given")
    currency: str = Field(default=DEFAULT_CURRENCY, description="Currency code of the budget")
    status: ProjectStatus = Field(default=ProjectStatus.NON_COMPLETED, description="Project status")
    start_date: Optional[date] = Field(default=None, description="Start date")
    end_date: Optional[date] = Field(default=None, description="End date")

    @field_validator('name', mode='before')
    @classmethod
    def validate_name(cls, v):
        return DataValidator.validate_name(v)

    @field_validator('description', mode='before')
    @classmethod
    def normalize_description(cls, v):
        return blank_to_none(v)

    @field_validator('budget', mode='before')
    @classmethod
    def validate_budget(cls, v):
        return BusinessValidator.validate_budget(v)

    @field_validator('currency', mode='before')
    @classmethod
    def validate_currency(cls, v):
        return DataValidator.validate_currency_code(v)

    @field_validator('start_date', 'end_date', mode='before')
    @classmethod
    def normalize_dates(cls, v):
        return _date_part(v)

    @field_validator('end_date')
    @classmethod
    def validate_date_range(cls, v, info: ValidationInfo):
        BusinessValidator.validate_date_range(info.data.get('start_date'), v)
        return v

    def to_store_values(self) -> Dict[str, Any]:
        """Column values as written to the projects table."""
        return {
            "name": self.name,
            "description": self.description,
            "budget": self.budget,
            "currency": self.currency,
            "status": self.status.value,
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "end_date": self.end_date.isoformat() if self.end_date else None,
        }


class CreateProjectRequestDTO(ProjectInputDTO):
    """DTO for project creation requests."""

    client_id: str = Field(description="Owning client ID")

    @field_validator('client_id', mode='before')
    @classmethod
    def validate_client_id(cls, v):
        v = blank_to_none(v)
        if v is None:
            raise ValueError("Client is required")
        return str(v)

    def to_store_values(self) -> Dict[str, Any]:
        values = super().to_store_values()
        values["client_id"] = self.client_id
        return values


# Response DTOs
class ProjectResponseDTO(ResponseDTO):
    """DTO for project responses."""

    client_id: str
    name: str
    description: Optional[str] = None
    budget: Optional[float] = None
    currency: str
    status: ProjectStatus
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @classmethod
    def from_domain(cls, project: Project) -> "ProjectResponseDTO":
        return cls(
            id=project.id,
            created_at=project.created_at,
            updated_at=project.updated_at,
            client_id=project.client_id,
            name=project.name,
            description=project.description,
            budget=project.budget,
            currency=project.currency,
            status=project.status,
            start_date=project.start_date,
            end_date=project.end_date,
        )


class ProjectWithTasksResponseDTO(ProjectResponseDTO):
    """DTO for a project together with its tasks."""

    tasks: List[TaskResponseDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, project: ProjectWithTasks) -> "ProjectWithTasksResponseDTO":
        base = ProjectResponseDTO.from_domain(project).model_dump()
        return cls(
            **base,
            tasks=[TaskResponseDTO.from_domain(task) for task in project.tasks],
        )
