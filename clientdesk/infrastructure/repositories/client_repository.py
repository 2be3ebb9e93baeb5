"""
Client repository implementation using Supabase.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from clientdesk.domain.models.base import DataAccessError
from clientdesk.domain.models.client import Client, ClientStatus
from clientdesk.domain.repositories.client_repository import ClientRepository as ClientRepositoryInterface
from clientdesk.infrastructure.mappers.client_mapper import ClientMapper
from clientdesk.infrastructure.repositories.base_repository import SupabaseRepository


class SupabaseClientRepository(SupabaseRepository, ClientRepositoryInterface):
    """Supabase implementation of client repository."""

    table_name = "clients"
    entity_type = "Client"
    unique_fields = ("email", "phone")

    def __init__(self, database):
        super().__init__(database)
        self.mapper = ClientMapper()

    async def list_clients(self, include_archived: bool = False) -> List[Client]:
        query = (await self._table()).select("*")
        if not include_archived:
            query = query.is_("archived_at", "null")
        query = query.order("created_at", desc=True)

        rows = await self._execute(query, "list")
        return self.mapper.rows_to_domain(rows)

    async def get_by_id(self, client_id: str, include_archived: bool = False) -> Optional[Client]:
        query = (await self._table()).select("*").eq("id", client_id)
        if not include_archived:
            query = query.is_("archived_at", "null")

        try:
            row = await self._execute_single(query, "read")
        except DataAccessError as exc:
            if self._is_invalid_id(exc):
                return None
            raise
        return self.mapper.row_to_domain(row) if row else None

    async def create(self, values: Dict[str, Any]) -> Client:
        query = (await self._table()).insert(values)
        row = await self._execute_single(query, "create")
        if row is None:
            raise DataAccessError("Failed to create client")
        return self.mapper.row_to_domain(row)

    async def update(self, client_id: str, values: Dict[str, Any]) -> Optional[Client]:
        query = (await self._table()).update(values).eq("id", client_id).is_("archived_at", "null")
        try:
            row = await self._execute_single(query, "update")
        except DataAccessError as exc:
            if self._is_invalid_id(exc):
                return None
            raise
        return self.mapper.row_to_domain(row) if row else None

    async def update_status(self, client_id: str, status: ClientStatus) -> Optional[Client]:
        return await self.update(client_id, {"status": status.value})

    async def archive_many(self, client_ids: Sequence[str], archived_at: datetime) -> int:
        if not client_ids:
            return 0
        query = (
            (await self._table())
            .update({"archived_at": archived_at.isoformat()})
            .in_("id", list(client_ids))
            .is_("archived_at", "null")
        )
        rows = await self._execute(query, "archive")
        return len(rows)
