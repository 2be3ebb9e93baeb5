"""
Client repository interface.
Defines the contract for client data persistence operations.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Dict, Any, Sequence

from clientdesk.domain.models.client import Client, ClientStatus


class ClientRepository(ABC):
    """
    Repository interface for the Client entity.
    Every read excludes archived clients unless include_archived is set.
    """

    @abstractmethod
    async def list_clients(self, include_archived: bool = False) -> List[Client]:
        """
        List clients, newest first.
        """
        pass

    @abstractmethod
    async def get_by_id(self, client_id: str, include_archived: bool = False) -> Optional[Client]:
        """
        Find a client by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def create(self, values: Dict[str, Any]) -> Client:
        """
        Insert one client and return the stored row.
        Raises DuplicateEntityError when email or phone is already taken.
        """
        pass

    @abstractmethod
    async def update(self, client_id: str, values: Dict[str, Any]) -> Optional[Client]:
        """
        Update a non-archived client by ID and return the stored row.
        Returns None when no such client exists.
        """
        pass

    @abstractmethod
    async def update_status(self, client_id: str, status: ClientStatus) -> Optional[Client]:
        """
        Change a client's status. Returns None when no such client exists.
        """
        pass

    @abstractmethod
    async def archive_many(self, client_ids: Sequence[str], archived_at: datetime) -> int:
        """
        Archive all given clients in a single request.
        Returns the number of rows touched.
        """
        pass
