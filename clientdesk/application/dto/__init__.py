"""
Data Transfer Objects for the application layer.
"""

from .base_dto import (
    BaseDTO, RequestDTO, ResponseDTO, ListRequestDTO, ListResponseDTO,
    MutationResponseDTO, field_errors_from
)
from .task_dto import TaskResponseDTO
from .project_dto import (
    ProjectInputDTO, CreateProjectRequestDTO, ProjectResponseDTO,
    ProjectWithTasksResponseDTO
)
from .client_dto import (
    ClientInputDTO, UpdateClientStatusRequestDTO, ArchiveClientsRequestDTO,
    ListClientsRequestDTO, ClientResponseDTO, ClientWithStatsResponseDTO,
    ClientTablePageResponseDTO, ClientDetailResponseDTO
)

__all__ = [
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "ListRequestDTO",
    "ListResponseDTO",
    "MutationResponseDTO",
    "field_errors_from",
    "TaskResponseDTO",
    "ProjectInputDTO",
    "CreateProjectRequestDTO",
    "ProjectResponseDTO",
    "ProjectWithTasksResponseDTO",
    "ClientInputDTO",
    "UpdateClientStatusRequestDTO",
    "ArchiveClientsRequestDTO",
    "ListClientsRequestDTO",
    "ClientResponseDTO",
    "ClientWithStatsResponseDTO",
    "ClientTablePageResponseDTO",
    "ClientDetailResponseDTO",
]
