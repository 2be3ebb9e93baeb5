"""
Task repository interface.
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Any, Sequence

from clientdesk.domain.models.task import Task


class TaskRepository(ABC):
    """Repository interface for the Task entity."""

    @abstractmethod
    async def list_for_projects(self, project_ids: Sequence[str]) -> List[Task]:
        """
        All non-archived tasks of the given projects, in one request.
        """
        pass

    @abstractmethod
    async def create(self, values: Dict[str, Any]) -> Task:
        """
        Insert one task and return the stored row.
        """
        pass
