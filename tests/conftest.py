"""
Shared fixtures: in-memory repositories standing in for Supabase.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Sequence
import itertools

import pytest

from clientdesk.domain.models.base import DuplicateEntityError, DataAccessError
from clientdesk.domain.models.client import Client, ClientStatus
from clientdesk.domain.models.project import Project
from clientdesk.domain.models.task import Task
from clientdesk.domain.repositories import ClientRepository, ProjectRepository, TaskRepository
from clientdesk.infrastructure.mappers import ClientMapper, ProjectMapper, TaskMapper


BASE_TIME = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)


class InMemoryStore:
    """Ids and timestamps the way the real store hands them out."""

    def __init__(self):
        self._ids = itertools.count(1)
        self._ticks = itertools.count()
        self.fail_with: Optional[Exception] = None

    def next_id(self, prefix: str) -> str:
        return f"{prefix}-{next(self._ids)}"

    def now(self) -> datetime:
        return BASE_TIME + timedelta(minutes=next(self._ticks))

    def check(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with


class FakeClientRepository(ClientRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store
        self.rows: Dict[str, Dict[str, Any]] = {}
        self.mapper = ClientMapper()
        self.archive_calls: List[List[str]] = []

    def _check_unique(self, values: Dict[str, Any], client_id: Optional[str] = None) -> None:
        for field in ("email", "phone"):
            for row in self.rows.values():
                if row["id"] != client_id and row["archived_at"] is None and row[field] == values.get(field):
                    raise DuplicateEntityError("Client", field)

    async def list_clients(self, include_archived: bool = False) -> List[Client]:
        self.store.check()
        rows = [r for r in self.rows.values() if include_archived or r["archived_at"] is None]
        rows.sort(key=lambda r: r["created_at"], reverse=True)
        return self.mapper.rows_to_domain(rows)

    async def get_by_id(self, client_id: str, include_archived: bool = False) -> Optional[Client]:
        self.store.check()
        row = self.rows.get(client_id)
        if row is None or (row["archived_at"] is not None and not include_archived):
            return None
        return self.mapper.row_to_domain(row)

    async def create(self, values: Dict[str, Any]) -> Client:
        self.store.check()
        self._check_unique(values)
        now = self.store.now()
        row = {
            "website_url": None,
            "notes": None,
            "status": "active",
            **values,
            "id": self.store.next_id("client"),
            "created_at": now,
            "updated_at": now,
            "archived_at": None,
        }
        self.rows[row["id"]] = row
        return self.mapper.row_to_domain(row)

    async def update(self, client_id: str, values: Dict[str, Any]) -> Optional[Client]:
        self.store.check()
        row = self.rows.get(client_id)
        if row is None or row["archived_at"] is not None:
            return None
        if "email" in values or "phone" in values:
            self._check_unique({**row, **values}, client_id)
        row.update(values, updated_at=self.store.now())
        return self.mapper.row_to_domain(row)

    async def update_status(self, client_id: str, status: ClientStatus) -> Optional[Client]:
        return await self.update(client_id, {"status": status.value})

    async def archive_many(self, client_ids: Sequence[str], archived_at: datetime) -> int:
        self.store.check()
        self.archive_calls.append(list(client_ids))
        count = 0
        for client_id in client_ids:
            row = self.rows.get(client_id)
            if row is not None and row["archived_at"] is None:
                row["archived_at"] = archived_at
                count += 1
        return count


class FakeProjectRepository(ProjectRepository):
    def __init__(self, store: InMemoryStore, clients: FakeClientRepository):
        self.store = store
        self.clients = clients
        self.rows: Dict[str, Dict[str, Any]] = {}
        self.mapper = ProjectMapper()
        self.list_calls: List[List[str]] = []

    async def list_for_clients(self, client_ids: Sequence[str]) -> List[Project]:
        self.store.check()
        self.list_calls.append(list(client_ids))
        rows = [
            r for r in self.rows.values()
            if r["client_id"] in client_ids and r["archived_at"] is None
        ]
        return self.mapper.rows_to_domain(rows)

    async def list_for_client(self, client_id: str) -> List[Project]:
        self.store.check()
        rows = [
            r for r in self.rows.values()
            if r["client_id"] == client_id and r["archived_at"] is None
        ]
        # start_date desc; PostgreSQL puts nulls first in descending order
        rows.sort(key=lambda r: (r.get("start_date") is None, r.get("start_date") or ""), reverse=True)
        return self.mapper.rows_to_domain(rows)

    async def get_by_id(self, project_id: str, include_archived: bool = False) -> Optional[Project]:
        self.store.check()
        row = self.rows.get(project_id)
        if row is None or (row["archived_at"] is not None and not include_archived):
            return None
        return self.mapper.row_to_domain(row)

    async def create(self, values: Dict[str, Any]) -> Project:
        self.store.check()
        if values.get("client_id") not in self.clients.rows:
            raise DataAccessError(
                'insert or update on table "projects" violates foreign key constraint',
                "23503"
            )
        now = self.store.now()
        row = {
            **values,
            "id": self.store.next_id("project"),
            "created_at": now,
            "updated_at": now,
            "archived_at": values.get("archived_at"),
        }
        self.rows[row["id"]] = row
        return self.mapper.row_to_domain(row)

    async def update(self, project_id: str, values: Dict[str, Any]) -> Optional[Project]:
        self.store.check()
        row = self.rows.get(project_id)
        if row is None or row["archived_at"] is not None:
            return None
        row.update({k: v for k, v in values.items() if k != "client_id"}, updated_at=self.store.now())
        return self.mapper.row_to_domain(row)


class FakeTaskRepository(TaskRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store
        self.rows: Dict[str, Dict[str, Any]] = {}
        self.mapper = TaskMapper()
        self.list_calls: List[List[str]] = []

    async def list_for_projects(self, project_ids: Sequence[str]) -> List[Task]:
        self.store.check()
        self.list_calls.append(list(project_ids))
        rows = [
            r for r in self.rows.values()
            if r["project_id"] in project_ids and r["archived_at"] is None
        ]
        return self.mapper.rows_to_domain(rows)

    async def create(self, values: Dict[str, Any]) -> Task:
        self.store.check()
        now = self.store.now()
        row = {
            **values,
            "id": self.store.next_id("task"),
            "created_at": now,
            "updated_at": now,
            "archived_at": values.get("archived_at"),
        }
        self.rows[row["id"]] = row
        return self.mapper.row_to_domain(row)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def client_repository(store):
    return FakeClientRepository(store)


@pytest.fixture
def project_repository(store, client_repository):
    return FakeProjectRepository(store, client_repository)


@pytest.fixture
def task_repository(store):
    return FakeTaskRepository(store)


@pytest.fixture
def client_payload():
    return {
        "name": "Acme Corporation",
        "email": "Contact@Acme.com",
        "phone": "+1-555-0101",
        "website_url": "acme.com",
        "status": "active",
        "notes": "Prefers monthly check-ins.",
    }


@pytest.fixture
def project_payload():
    return {
        "name": "Website Redesign",
        "description": "New marketing site",
        "budget": 5000,
        "currency": "usd",
        "status": "non_completed",
        "start_date": "2024-01-15",
        "end_date": "2024-03-01",
    }
