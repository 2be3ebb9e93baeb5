"""
Project repository interface.
Defines the contract for project data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Dict, Any, Sequence

from clientdesk.domain.models.project import Project


class ProjectRepository(ABC):
    """
    Repository interface for the Project entity.
    Every read excludes archived projects unless include_archived is set.
    """

    @abstractmethod
    async def list_for_clients(self, client_ids: Sequence[str]) -> List[Project]:
        """
        All non-archived projects owned by any of the given clients, in one request.
        """
        pass

    @abstractmethod
    async def list_for_client(self, client_id: str) -> List[Project]:
        """
        Non-archived projects of one client, latest start date first.
        """
        pass

    @abstractmethod
    async def get_by_id(self, project_id: str, include_archived: bool = False) -> Optional[Project]:
        """
        Find a project by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def create(self, values: Dict[str, Any]) -> Project:
        """
        Insert one project and return the stored row.
        """
        pass

    @abstractmethod
    async def update(self, project_id: str, values: Dict[str, Any]) -> Optional[Project]:
        """
        Update a non-archived project by ID.
        Returns None when no such project exists.
        """
        pass
