"""
Task repository implementation using Supabase.
"""

from typing import Any, Dict, List, Sequence

from clientdesk.domain.models.base import DataAccessError
from clientdesk.domain.models.task import Task
from clientdesk.domain.repositories.task_repository import TaskRepository as TaskRepositoryInterface
from clientdesk.infrastructure.mappers.task_mapper import TaskMapper
from clientdesk.infrastructure.repositories.base_repository import SupabaseRepository


class SupabaseTaskRepository(SupabaseRepository, TaskRepositoryInterface):
    """Supabase implementation of task repository."""

    table_name = "tasks"
    entity_type = "Task"

    def __init__(self, database):
        super().__init__(database)
        self.mapper = TaskMapper()

    async def list_for_projects(self, project_ids: Sequence[str]) -> List[Task]:
        if not project_ids:
            return []
        query = (
            (await self._table())
            .select("*")
            .in_("project_id", list(project_ids))
            .is_("archived_at", "null")
            .order("created_at")
        )
        rows = await self._execute(query, "list")
        return self.mapper.rows_to_domain(rows)

    async def create(self, values: Dict[str, Any]) -> Task:
        query = (await self._table()).insert(values)
        row = await self._execute_single(query, "create")
        if row is None:
            raise DataAccessError("Failed to create task")
        return self.mapper.row_to_domain(row)
