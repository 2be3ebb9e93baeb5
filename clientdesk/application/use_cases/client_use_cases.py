"""
Client use cases for the application layer.
Implements the clients table, the client detail view and client mutations.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from clientdesk.application.use_cases.base_use_case import (
    CommandUseCase, QueryUseCase, GetByIdUseCase, require_found
)
from clientdesk.application.dto.client_dto import (
    ClientInputDTO, UpdateClientStatusRequestDTO, ArchiveClientsRequestDTO,
    ListClientsRequestDTO, ClientResponseDTO, ClientWithStatsResponseDTO,
    ClientTablePageResponseDTO, ClientDetailResponseDTO
)
from clientdesk.application.dto.project_dto import ProjectWithTasksResponseDTO
from clientdesk.application.view_models.clients_table_view_model import (
    build_client_table_page, filter_and_sort
)
from clientdesk.domain.models.base import utcnow
from clientdesk.domain.models.client import ClientWithStats
from clientdesk.domain.models.project import ProjectWithTasks
from clientdesk.domain.repositories.client_repository import ClientRepository
from clientdesk.domain.repositories.project_repository import ProjectRepository
from clientdesk.domain.repositories.task_repository import TaskRepository
from clientdesk.domain.services.client_stats_service import ClientStatsService
from clientdesk.infrastructure.export.csv_export import export_clients_csv, export_filename


logger = logging.getLogger(__name__)

TableQuery = Union[ListClientsRequestDTO, Mapping[str, Any], None]


@dataclass
class UpdateClientCommand:
    client_id: str
    payload: Dict[str, Any]


@dataclass
class UpdateClientStatusCommand:
    client_id: str
    status: Any


@dataclass
class ClientsExport:
    filename: str
    content: str
    count: int


def _table_query(query: TableQuery) -> ListClientsRequestDTO:
    if isinstance(query, ListClientsRequestDTO):
        return query
    return ListClientsRequestDTO.parse(dict(query or {}))


class CreateClientUseCase(CommandUseCase[Dict[str, Any], ClientResponseDTO]):
    """Use case for creating a new client."""

    def __init__(self, client_repository: ClientRepository):
        super().__init__()
        self.client_repository = client_repository

    async def _validate_request(self, request: Dict[str, Any]) -> ClientInputDTO:
        return ClientInputDTO.parse(request)

    async def _execute_command_logic(self, request: ClientInputDTO) -> ClientResponseDTO:
        client = await self.client_repository.create(request.to_store_values())
        logger.info("Created client %s", client.id)
        return ClientResponseDTO.from_domain(client)


class UpdateClientUseCase(CommandUseCase[UpdateClientCommand, ClientResponseDTO]):
    """Use case for replacing a client's editable fields."""

    def __init__(self, client_repository: ClientRepository):
        super().__init__()
        self.client_repository = client_repository

    async def _validate_request(self, request: UpdateClientCommand):
        return request.client_id, ClientInputDTO.parse(request.payload)

    async def _execute_command_logic(self, request) -> ClientResponseDTO:
        client_id, data = request
        client = require_found(
            await self.client_repository.update(client_id, data.to_store_values()),
            "Client", client_id
        )
        logger.info("Updated client %s", client.id)
        return ClientResponseDTO.from_domain(client)


class UpdateClientStatusUseCase(CommandUseCase[UpdateClientStatusCommand, ClientResponseDTO]):
    """Use case for switching a client between active and non-active."""

    def __init__(self, client_repository: ClientRepository):
        super().__init__()
        self.client_repository = client_repository

    async def _validate_request(self, request: UpdateClientStatusCommand):
        data = UpdateClientStatusRequestDTO.parse({"status": request.status})
        return request.client_id, data.status

    async def _execute_command_logic(self, request) -> ClientResponseDTO:
        client_id, status = request
        client = require_found(
            await self.client_repository.update_status(client_id, status),
            "Client", client_id
        )
        logger.info("Client %s is now %s", client.id, status.value)
        return ClientResponseDTO.from_domain(client)


class ArchiveClientsUseCase(CommandUseCase[Union[Sequence[str], Mapping[str, Any]], int]):
    """
    Use case for archiving clients.
    All ids go to the store in one request, so the batch succeeds or fails as a whole.
    """

    def __init__(self, client_repository: ClientRepository):
        super().__init__()
        self.client_repository = client_repository

    async def _validate_request(self, request) -> List[str]:
        if isinstance(request, Mapping):
            payload = dict(request)
        else:
            payload = {"ids": list(request or [])}
        return ArchiveClientsRequestDTO.parse(payload).ids

    async def _execute_command_logic(self, request: List[str]) -> int:
        if not request:
            return 0
        archived = await self.client_repository.archive_many(request, utcnow())
        logger.info("Archived %d of %d clients", archived, len(request))
        return archived


class ListClientsWithStatsUseCase(QueryUseCase[TableQuery, ClientTablePageResponseDTO]):
    """Use case for the clients table: every client with its stats, one page at a time."""

    def __init__(
        self,
        client_repository: ClientRepository,
        project_repository: ProjectRepository,
        stats_service: Optional[ClientStatsService] = None
    ):
        super().__init__()
        self.client_repository = client_repository
        self.project_repository = project_repository
        self.stats_service = stats_service or ClientStatsService()

    async def load_clients(self) -> List[ClientWithStats]:
        """Non-archived clients, newest first, each with its project statistics."""
        clients = await self.client_repository.list_clients()
        if not clients:
            return []

        projects = await self.project_repository.list_for_clients([c.id for c in clients])
        return self.stats_service.build_clients_with_stats(clients, projects)

    async def _validate_request(self, request: TableQuery) -> ListClientsRequestDTO:
        return _table_query(request)

    async def _execute_business_logic(self, request: ListClientsRequestDTO) -> ClientTablePageResponseDTO:
        clients = await self.load_clients()
        return build_client_table_page(clients, request)


class ExportClientsUseCase(QueryUseCase[TableQuery, ClientsExport]):
    """
    Use case for the CSV download.
    Exports every row the table query matches, in table order, ignoring pagination.
    """

    def __init__(self, list_use_case: ListClientsWithStatsUseCase):
        super().__init__()
        self.list_use_case = list_use_case

    async def _validate_request(self, request: TableQuery) -> ListClientsRequestDTO:
        return _table_query(request)

    async def _execute_business_logic(self, request: ListClientsRequestDTO) -> ClientsExport:
        clients = await self.list_use_case.load_clients()
        rows = filter_and_sort(
            clients,
            search=request.search,
            status=request.status,
            sort_by=request.sort_by,
            sort_order=request.sort_order,
        )
        return ClientsExport(
            filename=export_filename(),
            content=export_clients_csv(rows),
            count=len(rows),
        )


class GetClientDetailUseCase(GetByIdUseCase[str, ClientDetailResponseDTO]):
    """Use case for the client detail page: stats, projects and their tasks."""

    def __init__(
        self,
        client_repository: ClientRepository,
        project_repository: ProjectRepository,
        task_repository: TaskRepository,
        stats_service: Optional[ClientStatsService] = None
    ):
        super().__init__()
        self.client_repository = client_repository
        self.project_repository = project_repository
        self.task_repository = task_repository
        self.stats_service = stats_service or ClientStatsService()

    async def _execute_business_logic(self, client_id: str) -> ClientDetailResponseDTO:
        client, projects = await asyncio.gather(
            self.client_repository.get_by_id(client_id),
            self.project_repository.list_for_client(client_id),
            return_exceptions=True
        )
        for outcome in (client, projects):
            if isinstance(outcome, BaseException):
                raise outcome
        client = require_found(client, "Client", client_id)

        tasks = []
        if projects:
            tasks = await self.task_repository.list_for_projects([p.id for p in projects])

        tasks_by_project: Dict[str, list] = {project.id: [] for project in projects}
        for task in tasks:
            if task.project_id in tasks_by_project:
                tasks_by_project[task.project_id].append(task)

        return ClientDetailResponseDTO(
            client=ClientWithStatsResponseDTO.from_domain(
                self.stats_service.with_stats(client, projects)
            ),
            projects=[
                ProjectWithTasksResponseDTO.from_domain(
                    ProjectWithTasks.from_project(project, tasks_by_project[project.id])
                )
                for project in projects
            ],
        )
