"""
Project router.
"""

from typing import Annotated, Any, Dict

from fastapi import APIRouter, Body, Depends

from clientdesk.application.use_cases.project_use_cases import (
    GetProjectUseCase, UpdateProjectUseCase, UpdateProjectCommand
)
from clientdesk.infrastructure.web.dependencies import (
    get_project_use_case, get_update_project_use_case
)
from clientdesk.infrastructure.web.responses import mutation_response, query_response


router = APIRouter()


@router.get("/{project_id}")
async def get_project(
    project_id: str,
    use_case: Annotated[GetProjectUseCase, Depends(get_project_use_case)]
):
    """Get a specific project by ID."""
    result = await use_case.execute(project_id)
    return query_response(result)


@router.put("/{project_id}")
async def update_project(
    project_id: str,
    payload: Annotated[Dict[str, Any], Body()],
    use_case: Annotated[UpdateProjectUseCase, Depends(get_update_project_use_case)]
):
    """Edit a project. A client_id in the body is ignored."""
    result = await use_case.execute(UpdateProjectCommand(project_id=project_id, payload=payload))
    return mutation_response(result)
