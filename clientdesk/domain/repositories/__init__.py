"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from .client_repository import ClientRepository
from .project_repository import ProjectRepository
from .task_repository import TaskRepository

__all__ = [
    "ClientRepository",
    "ProjectRepository",
    "TaskRepository",
]
