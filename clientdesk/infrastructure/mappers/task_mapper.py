"""
Task mapper for converting between store rows and domain entities.
"""

from typing import Any, Dict, Iterable, List

from clientdesk.domain.models.task import Task, TaskStatus, TaskPriority
from clientdesk.infrastructure.mappers.row_values import parse_date, parse_datetime, parse_number


class TaskMapper:
    """Maps between a `tasks` row and the Task domain entity."""

    def row_to_domain(self, row: Dict[str, Any]) -> Task:
        """Convert a `tasks` row to a Task."""
        assigned_to = row.get("assigned_to")
        return Task(
            id=str(row["id"]),
            project_id=str(row["project_id"]),
            name=row.get("name") or "",
            description=row.get("description"),
            status=TaskStatus(row["status"]) if row.get("status") else TaskStatus.OPEN,
            priority=TaskPriority(row["priority"]) if row.get("priority") else TaskPriority.MEDIUM,
            start_date=parse_date(row.get("start_date")),
            end_date=parse_date(row.get("end_date")),
            estimated_hours=parse_number(row.get("estimated_hours")),
            actual_hours=parse_number(row.get("actual_hours")),
            assigned_to=str(assigned_to) if assigned_to is not None else None,
            created_at=parse_datetime(row.get("created_at")),
            updated_at=parse_datetime(row.get("updated_at")),
            archived_at=parse_datetime(row.get("archived_at")),
        )

    def rows_to_domain(self, rows: Iterable[Dict[str, Any]]) -> List[Task]:
        return [self.row_to_domain(row) for row in rows]
