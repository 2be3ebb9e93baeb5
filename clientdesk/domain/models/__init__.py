"""
Domain models.
Entities, enums and domain exceptions shared by every layer.
"""

from .base import (
    BaseEntity,
    DomainException,
    ValidationError,
    EntityNotFoundError,
    DuplicateEntityError,
    DataAccessError,
    ConfigurationError,
)
from .client import Client, ClientStatus, ClientWithStats, DEFAULT_CURRENCY
from .task import Task, TaskStatus, TaskPriority
from .project import Project, ProjectStatus, ProjectWithTasks

__all__ = [
    "BaseEntity",
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "DataAccessError",
    "ConfigurationError",
    "Client",
    "ClientStatus",
    "ClientWithStats",
    "DEFAULT_CURRENCY",
    "Task",
    "TaskStatus",
    "TaskPriority",
    "Project",
    "ProjectStatus",
    "ProjectWithTasks",
]
