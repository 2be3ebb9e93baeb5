"""
Shared plumbing for the Supabase repositories.
"""

import logging
from typing import Any, Dict, List, Optional

from postgrest.exceptions import APIError

from clientdesk.domain.models.base import DataAccessError, DuplicateEntityError
from clientdesk.infrastructure.db.supabase import SupabaseDatabase


logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"
INVALID_TEXT_REPRESENTATION = "22P02"


class SupabaseRepository:
    """Base class: one table, errors translated into domain exceptions."""

    table_name: str = ""
    entity_type: str = ""
    unique_fields: tuple = ()

    def __init__(self, database: SupabaseDatabase):
        self.database = database

    async def _table(self):
        return await self.database.table(self.table_name)

    async def _execute(self, query, action: str) -> List[Dict[str, Any]]:
        """Run a built query and return its rows."""
        try:
            response = await query.execute()
        except APIError as exc:
            raise self._translate(exc, action) from exc
        return list(response.data or [])

    async def _execute_single(self, query, action: str) -> Optional[Dict[str, Any]]:
        rows = await self._execute(query, action)
        return rows[0] if rows else None

    def _translate(self, exc: APIError, action: str) -> Exception:
        if exc.code == UNIQUE_VIOLATION:
            field = self._conflicting_field(exc)
            logger.info("Duplicate %s on %s while trying to %s", self.entity_type, field, action)
            return DuplicateEntityError(self.entity_type, field)

        logger.error(
            "Supabase error while trying to %s %s: %s (code %s)",
            action, self.table_name, exc.message, exc.code
        )
        return DataAccessError(exc.message or f"Failed to {action} {self.table_name}", exc.code)

    def _conflicting_field(self, exc: APIError) -> Optional[str]:
        text = " ".join(str(part) for part in (exc.message, exc.details) if part)
        for field in self.unique_fields:
            if field in text:
                return field
        return None

    @staticmethod
    def _is_invalid_id(exc: DataAccessError) -> bool:
        """Malformed ids (e.g. not a UUID) are rejected by the store rather than matching nothing."""
        return exc.store_code == INVALID_TEXT_REPRESENTATION
