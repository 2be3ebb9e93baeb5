"""
Base use case classes for the application layer.
Every operation returns a UseCaseResult instead of raising, except for
configuration problems, which are not recoverable and always propagate.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TypeVar, Generic
from dataclasses import dataclass, field
from datetime import datetime

from clientdesk.domain.models.base import (
    utcnow, DomainException, ValidationError, EntityNotFoundError,
    DuplicateEntityError, ConfigurationError
)


logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


DUPLICATE_FIELD_MESSAGES = {
    "email": "A client with this email already exists. Please use a different email.",
    "phone": "A client with this phone number already exists. Please use a different phone number.",
}


@dataclass
class UseCaseResult(Generic[T]):
    """Result wrapper for use case operations."""

    success: bool
    data: Optional[T] = None
    id: Optional[str] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    field_errors: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def success_result(cls, data: T = None, id: Optional[str] = None) -> "UseCaseResult[T]":
        """Create a successful result."""
        return cls(success=True, data=data, id=id)

    @classmethod
    def error_result(
        cls,
        error: str,
        error_code: Optional[str] = None,
        field_errors: Optional[Dict[str, str]] = None
    ) -> "UseCaseResult[T]":
        """Create an error result."""
        return cls(
            success=False,
            error=error,
            error_code=error_code,
            field_errors=dict(field_errors or {})
        )

    @classmethod
    def from_exception(cls, exc: Exception) -> "UseCaseResult[T]":
        """Create error result from exception."""
        if isinstance(exc, ValidationError):
            return cls.error_result(exc.message, exc.code, exc.field_errors)
        elif isinstance(exc, DuplicateEntityError):
            message = DUPLICATE_FIELD_MESSAGES.get(exc.field, exc.message)
            field_errors = {exc.field: message} if exc.field else None
            return cls.error_result(message, exc.code, field_errors)
        elif isinstance(exc, DomainException):
            return cls.error_result(exc.message, exc.code)
        else:
            return cls.error_result(str(exc), "UNKNOWN_ERROR")

    @property
    def is_not_found(self) -> bool:
        return self.error_code == "ENTITY_NOT_FOUND"


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.
    Provides common structure and error handling.
    """

    def __init__(self):
        self.execution_start: Optional[datetime] = None
        self.execution_end: Optional[datetime] = None

    async def execute(self, request: T) -> UseCaseResult[R]:
        """
        Execute the use case with proper error handling and logging.
        """
        self.execution_start = utcnow()

        try:
            validated = await self._validate_request(request)
            result = await self._execute_business_logic(validated)
            return self._wrap(result)

        except ConfigurationError:
            logger.error("%s aborted: data store is not configured", type(self).__name__)
            raise

        except DomainException as exc:
            logger.warning("%s failed: %s (%s)", type(self).__name__, exc.message, exc.code)
            return UseCaseResult.from_exception(exc)

        except Exception as exc:
            logger.exception("%s failed unexpectedly", type(self).__name__)
            return UseCaseResult.from_exception(exc)

        finally:
            self.execution_end = utcnow()
            logger.debug(
                "%s finished in %.3fs",
                type(self).__name__,
                (self.execution_end - self.execution_start).total_seconds()
            )

    async def _validate_request(self, request: T) -> Any:
        """
        Validate the request and return what the business logic should receive.
        Override in subclasses that accept raw payloads.
        """
        return request

    def _wrap(self, result: R) -> UseCaseResult[R]:
        return UseCaseResult.success_result(result)

    @abstractmethod
    async def _execute_business_logic(self, request: Any) -> R:
        """
        Execute the core business logic. Must be implemented by subclasses.
        """
        pass


class QueryUseCase(BaseUseCase[T, R]):
    """
    Base class for query use cases (read operations).
    """
    pass


class CommandUseCase(BaseUseCase[T, R]):
    """
    Base class for command use cases (write operations).
    Successful results carry the id of the written record when there is one.
    """

    def _wrap(self, result: R) -> UseCaseResult[R]:
        return UseCaseResult.success_result(result, id=getattr(result, "id", None))

    async def _execute_business_logic(self, request: Any) -> R:
        return await self._execute_command_logic(request)

    @abstractmethod
    async def _execute_command_logic(self, request: Any) -> R:
        """Execute the command logic. Must be implemented by subclasses."""
        pass


class GetByIdUseCase(QueryUseCase[T, R]):
    """Base class for get-by-id use cases."""

    async def _validate_request(self, request: T) -> Any:
        if not request or not str(request).strip():
            raise ValidationError("ID is required", "id")
        return str(request).strip()


def require_found(entity: Optional[Any], entity_type: str, entity_id: Any) -> Any:
    """Return `entity`, or raise EntityNotFoundError when the store had no such row."""
    if entity is None:
        raise EntityNotFoundError(entity_type, entity_id)
    return entity
