"""
Base entity and domain exceptions.
This module contains the foundational classes for all domain entities.
"""

from datetime import datetime, timezone
from typing import Optional, Any, Dict, List
from abc import ABC
from dataclasses import dataclass


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(kw_only=True)
class BaseEntity(ABC):
    """
    Base class for all domain entities.
    Identity is an opaque string assigned by the data store; timestamps are
    store-managed and may be absent on entities that were never persisted.
    """

    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    archived_at: Optional[datetime] = None


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """
    Raised when input fails the field rules.
    Carries every failing field with its human-readable message.
    """

    def __init__(self, message: str, field: Optional[str] = None, field_errors: Optional[Dict[str, str]] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field_errors: Dict[str, str] = dict(field_errors or {})
        if field and field not in self.field_errors:
            self.field_errors[field] = message
        self.field = field or next(iter(self.field_errors), None)


class EntityNotFoundError(DomainException):
    """Exception raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any):
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, "ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id


class DuplicateEntityError(DomainException):
    """Exception raised when a uniqueness constraint rejects a write."""

    def __init__(self, entity_type: str, field: Optional[str], value: Any = None):
        if field:
            message = f"{entity_type} with this {field} already exists"
        else:
            message = f"{entity_type} already exists"
        super().__init__(message, "DUPLICATE_ENTITY")
        self.entity_type = entity_type
        self.field = field
        self.value = value


class DataAccessError(DomainException):
    """Exception raised when the data store rejects or fails an operation."""

    def __init__(self, message: str, store_code: Optional[str] = None):
        super().__init__(message, "DATA_ACCESS_ERROR")
        self.store_code = store_code


class ConfigurationError(DomainException):
    """Exception raised when required configuration is missing. Not recoverable."""

    def __init__(self, message: str, missing: Optional[List[str]] = None):
        super().__init__(message, "CONFIGURATION_ERROR")
        self.missing = list(missing or [])
