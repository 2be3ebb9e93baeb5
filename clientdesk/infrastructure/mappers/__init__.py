"""
Infrastructure mappers module.
Contains mappers for converting between store rows and domain entities.
"""

from .client_mapper import ClientMapper
from .project_mapper import ProjectMapper
from .task_mapper import TaskMapper

__all__ = [
    "ClientMapper",
    "ProjectMapper",
    "TaskMapper",
]
