"""
Client DTOs for the application layer.
Data Transfer Objects for client-related operations.
"""

from typing import Optional, List, Literal, Any, Dict
from datetime import date
from pydantic import Field, field_validator

from .base_dto import BaseDTO, RequestDTO, ResponseDTO, ListRequestDTO, ListResponseDTO
from .project_dto import ProjectWithTasksResponseDTO
from clientdesk.domain.models.client import Client, ClientStatus, ClientWithStats
from clientdesk.infrastructure.validation.validators import DataValidator, blank_to_none


ClientSortColumn = Literal[
    "name",
    "status",
    "email",
    "phone",
    "projects_count",
    "total_budget",
    "created_at",
    "earliest_start",
    "latest_end",
]

StatusFilter = Literal["all", "active", "non_active"]


# Request DTOs
class ClientInputDTO(RequestDTO):
    """DTO for client create and update requests."""

    name: str = Field(description="Client name")
    email: str = Field(description="Contact email, unique among active records")
    phone: str = Field(description="Phone number, unique among active records")
    website_url: Optional[str] = Field(default=None, description="Website URL")
    status: ClientStatus = Field(default=ClientStatus.ACTIVE, description="Client status")
    notes: Optional[str] = Field(default=None, description="Free-text notes")

    @field_validator('name', mode='before')
    @classmethod
    def validate_name(cls, v):
        return DataValidator.validate_name(v)

    @field_validator('email', mode='before')
    @classmethod
    def validate_email(cls, v):
        return DataValidator.validate_email(v)

    @field_validator('phone', mode='before')
    @classmethod
    def validate_phone(cls, v):
        return DataValidator.validate_phone(v)

    @field_validator('website_url', mode='before')
    @classmethod
    def validate_website(cls, v):
        return DataValidator.validate_url(v)

    @field_validator('notes', mode='before')
    @classmethod
    def normalize_notes(cls, v):
        return blank_to_none(v)

    def to_store_values(self) -> Dict[str, Any]:
        """Column values as written to the clients table."""
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "website_url": self.website_url,
            "status": self.status.value,
            "notes": self.notes,
        }


class UpdateClientStatusRequestDTO(RequestDTO):
    """DTO for toggling a client's status."""

    status: ClientStatus = Field(description="New status")


class ArchiveClientsRequestDTO(RequestDTO):
    """DTO for archiving several clients at once."""

    ids: List[str] = Field(default_factory=list, description="Client IDs to archive")

    @field_validator('ids')
    @classmethod
    def drop_duplicates(cls, v):
        return list(dict.fromkeys(client_id for client_id in v if client_id))


class ListClientsRequestDTO(ListRequestDTO):
    """
    DTO for the clients table: search, status filter, sort and page.
    Defaults show active clients in store order, 25 per page.
    """

    status: StatusFilter = Field(default="active", description="Filter by client status")
    sort_by: Optional[ClientSortColumn] = Field(default=None, description="Column to sort by")

    @field_validator('search', mode='before')
    @classmethod
    def normalize_search(cls, v):
        return v or None

    def with_filters(self, **changes) -> "ListClientsRequestDTO":
        """
        Copy with new filter or sort values. The copy always starts at page 1,
        so changing what is shown never leaves the user on a page past the end.
        """
        changes["page"] = 1
        return self.model_validate({**self.model_dump(), **changes})

    def with_page(self, page: int) -> "ListClientsRequestDTO":
        return self.model_validate({**self.model_dump(), "page": page})


# Response DTOs
class ClientResponseDTO(ResponseDTO):
    """DTO for client responses."""

    name: str
    email: str
    phone: str
    website_url: Optional[str] = None
    status: ClientStatus
    notes: Optional[str] = None

    @classmethod
    def from_domain(cls, client: Client) -> "ClientResponseDTO":
        return cls(
            id=client.id,
            created_at=client.created_at,
            updated_at=client.updated_at,
            name=client.name,
            email=client.email,
            phone=client.phone,
            website_url=client.website_url,
            status=client.status,
            notes=client.notes,
        )


class ClientWithStatsResponseDTO(ClientResponseDTO):
    """DTO for a client row with its project statistics."""

    projects_count: int = 0
    total_budget: float = 0
    primary_currency: str = "USD"
    earliest_start: Optional[date] = None
    latest_end: Optional[date] = None

    @classmethod
    def from_domain(cls, client: ClientWithStats) -> "ClientWithStatsResponseDTO":
        base = ClientResponseDTO.from_domain(client).model_dump()
        return cls(
            **base,
            projects_count=client.projects_count,
            total_budget=client.total_budget,
            primary_currency=client.primary_currency,
            earliest_start=client.earliest_start,
            latest_end=client.latest_end,
        )


class ClientTablePageResponseDTO(ListResponseDTO[ClientWithStatsResponseDTO]):
    """One page of the clients table."""
    pass


class ClientDetailResponseDTO(BaseDTO):
    """DTO for the client detail view: the client, its stats and its projects with tasks."""

    client: ClientWithStatsResponseDTO
    projects: List[ProjectWithTasksResponseDTO] = Field(default_factory=list)
