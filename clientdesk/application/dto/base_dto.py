"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from typing import Any, Dict, List, Optional, TypeVar, Generic
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from clientdesk.domain.models.base import ValidationError


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Validate assignment
        validate_assignment=True,
        extra="forbid",
    )


class RequestDTO(BaseDTO):
    """Base class for request DTOs."""

    @classmethod
    def parse(cls, payload: Dict[str, Any]):
        """
        Validate a raw payload.
        Every failing field is collected into a single domain ValidationError.
        """
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as exc:
            field_errors = field_errors_from(exc)
            raise ValidationError(
                "Please correct the highlighted fields",
                field_errors=field_errors
            )


class ResponseDTO(BaseDTO):
    """Base class for response DTOs."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ListRequestDTO(RequestDTO):
    """Base class for list request DTOs with pagination."""

    page: int = Field(default=1, ge=1, description="Page number")
    page_size: int = Field(default=25, ge=1, le=100, description="Items per page")
    search: Optional[str] = Field(default=None, max_length=255, description="Search query")
    sort_by: Optional[str] = Field(default=None, description="Sort field")
    sort_order: str = Field(default="asc", pattern="^(asc|desc)$", description="Sort order")


T = TypeVar('T')


class ListResponseDTO(BaseDTO, Generic[T]):
    """Base class for paginated list responses."""

    items: List[T] = Field(description="List of items")
    total: int = Field(description="Total number of matching items")
    page: int = Field(description="Current page number")
    page_size: int = Field(description="Items per page")
    total_pages: int = Field(description="Total number of pages")
    has_next: bool = Field(description="Whether there are more pages")
    has_prev: bool = Field(description="Whether there are previous pages")


class MutationResponseDTO(BaseDTO):
    """Uniform outcome of a write operation."""

    success: bool
    error: Optional[str] = None
    id: Optional[str] = None
    error_code: Optional[str] = None
    field_errors: Dict[str, str] = Field(default_factory=dict)


def field_errors_from(exc: PydanticValidationError) -> Dict[str, str]:
    """Flatten pydantic errors into {field: message}, keeping the first message per field."""
    field_errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("__root__",)
        field = str(loc[0])
        if field in field_errors:
            continue
        field_errors[field] = _humanize(field, error)
    return field_errors


def _humanize(field: str, error: Dict[str, Any]) -> str:
    error_type = error.get("type", "")
    message = error.get("msg", "Invalid value")

    if error_type == "missing":
        return f"{field.replace('_', ' ').capitalize()} is required"
    if error_type == "extra_forbidden":
        return "Unknown field"
    if error_type == "value_error" and message.startswith("Value error, "):
        return message[len("Value error, "):]
    return message
