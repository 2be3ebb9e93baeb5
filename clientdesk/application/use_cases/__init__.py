"""
Use cases for the application layer.
"""

from .base_use_case import UseCaseResult, BaseUseCase, QueryUseCase, CommandUseCase
from .client_use_cases import (
    CreateClientUseCase, UpdateClientUseCase, UpdateClientStatusUseCase,
    ArchiveClientsUseCase, ListClientsWithStatsUseCase, ExportClientsUseCase,
    GetClientDetailUseCase, UpdateClientCommand, UpdateClientStatusCommand,
    ClientsExport
)
from .project_use_cases import (
    CreateProjectUseCase, UpdateProjectUseCase, GetProjectUseCase,
    UpdateProjectCommand
)

__all__ = [
    "UseCaseResult",
    "BaseUseCase",
    "QueryUseCase",
    "CommandUseCase",
    "CreateClientUseCase",
    "UpdateClientUseCase",
    "UpdateClientStatusUseCase",
    "ArchiveClientsUseCase",
    "ListClientsWithStatsUseCase",
    "ExportClientsUseCase",
    "GetClientDetailUseCase",
    "UpdateClientCommand",
    "UpdateClientStatusCommand",
    "ClientsExport",
    "CreateProjectUseCase",
    "UpdateProjectUseCase",
    "GetProjectUseCase",
    "UpdateProjectCommand",
]
