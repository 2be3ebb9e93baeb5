"""
Project use cases for the application layer.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict

from clientdesk.application.use_cases.base_use_case import (
    CommandUseCase, GetByIdUseCase, require_found
)
from clientdesk.application.dto.project_dto import (
    ProjectInputDTO, CreateProjectRequestDTO, ProjectResponseDTO
)
from clientdesk.domain.repositories.project_repository import ProjectRepository


logger = logging.getLogger(__name__)


@dataclass
class UpdateProjectCommand:
    project_id: str
    payload: Dict[str, Any]


class CreateProjectUseCase(CommandUseCase[Dict[str, Any], ProjectResponseDTO]):
    """
    Use case for adding a project to a client.
    An unknown client_id is reported by the store as a data access error.
    """

    def __init__(self, project_repository: ProjectRepository):
        super().__init__()
        self.project_repository = project_repository

    async def _validate_request(self, request: Dict[str, Any]) -> CreateProjectRequestDTO:
        return CreateProjectRequestDTO.parse(request)

    async def _execute_command_logic(self, request: CreateProjectRequestDTO) -> ProjectResponseDTO:
        project = await self.project_repository.create(request.to_store_values())
        logger.info("Created project %s for client %s", project.id, project.client_id)
        return ProjectResponseDTO.from_domain(project)


class UpdateProjectUseCase(CommandUseCase[UpdateProjectCommand, ProjectResponseDTO]):
    """Use case for editing a project. The owning client never changes."""

    def __init__(self, project_repository: ProjectRepository):
        super().__init__()
        self.project_repository = project_repository

    async def _validate_request(self, request: UpdateProjectCommand):
        payload = {k: v for k, v in request.payload.items() if k != "client_id"}
        return request.project_id, ProjectInputDTO.parse(payload)

    async def _execute_command_logic(self, request) -> ProjectResponseDTO:
        project_id, data = request
        project = require_found(
            await self.project_repository.update(project_id, data.to_store_values()),
            "Project", project_id
        )
        logger.info("Updated project %s", project.id)
        return ProjectResponseDTO.from_domain(project)


class GetProjectUseCase(GetByIdUseCase[str, ProjectResponseDTO]):
    """Use case for reading one project, e.g. to fill the edit form."""

    def __init__(self, project_repository: ProjectRepository):
        super().__init__()
        self.project_repository = project_repository

    async def _execute_business_logic(self, project_id: str) -> ProjectResponseDTO:
        project = require_found(
            await self.project_repository.get_by_id(project_id),
            "Project", project_id
        )
        return ProjectResponseDTO.from_domain(project)
