"""
Project mapper for converting between store rows and domain entities.
"""

from typing import Any, Dict, Iterable, List

from clientdesk.domain.models.client import DEFAULT_CURRENCY
from clientdesk.domain.models.project import Project, ProjectStatus
from clientdesk.infrastructure.mappers.row_values import parse_date, parse_datetime, parse_number


class ProjectMapper:
    """Maps between a `projects` row and the Project domain entity."""

    def row_to_domain(self, row: Dict[str, Any]) -> Project:
        """Convert a `projects` row to a Project."""
        return Project(
            id=str(row["id"]),
            client_id=str(row["client_id"]),
            name=row.get("name") or "",
            description=row.get("description"),
            budget=parse_number(row.get("budget")),
            currency=row.get("currency") or DEFAULT_CURRENCY,
            status=ProjectStatus(row["status"]) if row.get("status") else ProjectStatus.NON_COMPLETED,
            start_date=parse_date(row.get("start_date")),
            end_date=parse_date(row.get("end_date")),
            created_at=parse_datetime(row.get("created_at")),
            updated_at=parse_datetime(row.get("updated_at")),
            archived_at=parse_datetime(row.get("archived_at")),
        )

    def rows_to_domain(self, rows: Iterable[Dict[str, Any]]) -> List[Project]:
        return [self.row_to_domain(row) for row in rows]
