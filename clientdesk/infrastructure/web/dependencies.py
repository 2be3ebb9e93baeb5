"""
FastAPI dependencies.
Wires the shared Supabase handle into repositories and use cases.
"""

from typing import Annotated

from fastapi import Depends, Request

from clientdesk.application.use_cases.client_use_cases import (
    CreateClientUseCase, UpdateClientUseCase, UpdateClientStatusUseCase,
    ArchiveClientsUseCase, ListClientsWithStatsUseCase, ExportClientsUseCase,
    GetClientDetailUseCase
)
from clientdesk.application.use_cases.project_use_cases import (
    CreateProjectUseCase, UpdateProjectUseCase, GetProjectUseCase
)
from clientdesk.config import Settings
from clientdesk.domain.repositories import ClientRepository, ProjectRepository, TaskRepository
from clientdesk.domain.services.client_stats_service import ClientStatsService
from clientdesk.infrastructure.db.supabase import SupabaseDatabase
from clientdesk.infrastructure.repositories import (
    SupabaseClientRepository, SupabaseProjectRepository, SupabaseTaskRepository
)


def get_app_settings(request: Request) -> Settings:
    """The settings the application was created with."""
    return request.app.state.settings


def get_database(request: Request) -> SupabaseDatabase:
    """The handle created with the application; connects on first query."""
    return request.app.state.database


def get_client_repository(database: Annotated[SupabaseDatabase, Depends(get_database)]) -> ClientRepository:
    return SupabaseClientRepository(database)


def get_project_repository(database: Annotated[SupabaseDatabase, Depends(get_database)]) -> ProjectRepository:
    return SupabaseProjectRepository(database)


def get_task_repository(database: Annotated[SupabaseDatabase, Depends(get_database)]) -> TaskRepository:
    return SupabaseTaskRepository(database)


def get_stats_service(settings: Annotated[Settings, Depends(get_app_settings)]) -> ClientStatsService:
    return ClientStatsService(default_currency=settings.default_currency)


ClientRepo = Annotated[ClientRepository, Depends(get_client_repository)]
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
TaskRepo = Annotated[TaskRepository, Depends(get_task_repository)]
StatsService = Annotated[ClientStatsService, Depends(get_stats_service)]


def get_list_clients_use_case(
    clients: ClientRepo, projects: ProjectRepo, stats: StatsService
) -> ListClientsWithStatsUseCase:
    return ListClientsWithStatsUseCase(clients, projects, stats)


def get_export_clients_use_case(
    list_use_case: Annotated[ListClientsWithStatsUseCase, Depends(get_list_clients_use_case)]
) -> ExportClientsUseCase:
    return ExportClientsUseCase(list_use_case)


def get_client_detail_use_case(
    clients: ClientRepo, projects: ProjectRepo, tasks: TaskRepo, stats: StatsService
) -> GetClientDetailUseCase:
    return GetClientDetailUseCase(clients, projects, tasks, stats)


def get_create_client_use_case(clients: ClientRepo) -> CreateClientUseCase:
    return CreateClientUseCase(clients)


def get_update_client_use_case(clients: ClientRepo) -> UpdateClientUseCase:
    return UpdateClientUseCase(clients)


def get_update_client_status_use_case(clients: ClientRepo) -> UpdateClientStatusUseCase:
    return UpdateClientStatusUseCase(clients)


def get_archive_clients_use_case(clients: ClientRepo) -> ArchiveClientsUseCase:
    return ArchiveClientsUseCase(clients)


def get_create_project_use_case(projects: ProjectRepo) -> CreateProjectUseCase:
    return CreateProjectUseCase(projects)


def get_update_project_use_case(projects: ProjectRepo) -> UpdateProjectUseCase:
    return UpdateProjectUseCase(projects)


def get_project_use_case(projects: ProjectRepo) -> GetProjectUseCase:
    return GetProjectUseCase(projects)
