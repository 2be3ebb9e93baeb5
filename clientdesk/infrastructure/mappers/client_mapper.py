"""
Client mapper for converting between store rows and domain entities.
"""

from typing import Any, Dict, Iterable, List

from clientdesk.domain.models.client import Client, ClientStatus
from clientdesk.infrastructure.mappers.row_values import parse_datetime


class ClientMapper:
    """Maps between a `clients` row and the Client domain entity."""

    def row_to_domain(self, row: Dict[str, Any]) -> Client:
        """Convert a `clients` row to a Client."""
        return Client(
            id=str(row["id"]),
            name=row.get("name") or "",
            email=row.get("email") or "",
            phone=row.get("phone") or "",
            website_url=row.get("website_url"),
            status=ClientStatus(row["status"]) if row.get("status") else ClientStatus.ACTIVE,
            notes=row.get("notes"),
            created_at=parse_datetime(row.get("created_at")),
            updated_at=parse_datetime(row.get("updated_at")),
            archived_at=parse_datetime(row.get("archived_at")),
        )

    def rows_to_domain(self, rows: Iterable[Dict[str, Any]]) -> List[Client]:
        return [self.row_to_domain(row) for row in rows]
