"""
Project repository implementation using Supabase.
"""

from typing import Any, Dict, List, Optional, Sequence

from clientdesk.domain.models.base import DataAccessError
from clientdesk.domain.models.project import Project
from clientdesk.domain.repositories.project_repository import ProjectRepository as ProjectRepositoryInterface
from clientdesk.infrastructure.mappers.project_mapper import ProjectMapper
from clientdesk.infrastructure.repositories.base_repository import SupabaseRepository


class SupabaseProjectRepository(SupabaseRepository, ProjectRepositoryInterface):
    """Supabase implementation of project repository."""

    table_name = "projects"
    entity_type = "Project"

    def __init__(self, database):
        super().__init__(database)
        self.mapper = ProjectMapper()

    async def list_for_clients(self, client_ids: Sequence[str]) -> List[Project]:
        if not client_ids:
            return []
        query = (
            (await self._table())
            .select("*")
            .in_("client_id", list(client_ids))
            .is_("archived_at", "null")
        )
        rows = await self._execute(query, "list")
        return self.mapper.rows_to_domain(rows)

    async def list_for_client(self, client_id: str) -> List[Project]:
        query = (
            (await self._table())
            .select("*")
            .eq("client_id", client_id)
            .is_("archived_at", "null")
            .order("start_date", desc=True)
        )
        try:
            rows = await self._execute(query, "list")
        except DataAccessError as exc:
            if self._is_invalid_id(exc):
                return []
            raise
        return self.mapper.rows_to_domain(rows)

    async def get_by_id(self, project_id: str, include_archived: bool = False) -> Optional[Project]:
        query = (await self._table()).select("*").eq("id", project_id)
        if not include_archived:
            query = query.is_("archived_at", "null")

        try:
            row = await self._execute_single(query, "read")
        except DataAccessError as exc:
            if self._is_invalid_id(exc):
                return None
            raise
        return self.mapper.row_to_domain(row) if row else None

    async def create(self, values: Dict[str, Any]) -> Project:
        query = (await self._table()).insert(values)
        row = await self._execute_single(query, "create")
        if row is None:
            raise DataAccessError("Failed to create project")
        return self.mapper.row_to_domain(row)

    async def update(self, project_id: str, values: Dict[str, Any]) -> Optional[Project]:
        values = {k: v for k, v in values.items() if k != "client_id"}
        query = (await self._table()).update(values).eq("id", project_id).is_("archived_at", "null")
        try:
            row = await self._execute_single(query, "update")
        except DataAccessError as exc:
            if self._is_invalid_id(exc):
                return None
            raise
        return self.mapper.row_to_domain(row) if row else None
