"""
Client management router.
Handles the clients table, CSV export, client detail and client mutations.
"""

from typing import Annotated, Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import StreamingResponse

from clientdesk.application.use_cases.client_use_cases import (
    CreateClientUseCase, UpdateClientUseCase, UpdateClientStatusUseCase,
    ArchiveClientsUseCase, ListClientsWithStatsUseCase, ExportClientsUseCase,
    GetClientDetailUseCase, UpdateClientCommand, UpdateClientStatusCommand
)
from clientdesk.application.use_cases.project_use_cases import CreateProjectUseCase
from clientdesk.config import Settings
from clientdesk.infrastructure.web.dependencies import (
    get_app_settings,
    get_list_clients_use_case, get_export_clients_use_case, get_client_detail_use_case,
    get_create_client_use_case, get_update_client_use_case,
    get_update_client_status_use_case, get_archive_clients_use_case,
    get_create_project_use_case
)
from clientdesk.infrastructure.web.responses import (
    error_response, mutation_response, query_response
)


router = APIRouter()

Payload = Annotated[Dict[str, Any], Body()]


def table_params(
    settings: Annotated[Settings, Depends(get_app_settings)],
    search: Optional[str] = Query(None, description="Matches name, email or phone"),
    status: Optional[str] = Query(None, description="all, active or non_active (default active)"),
    sort_by: Optional[str] = Query(None, description="Column to sort by"),
    sort_order: Optional[str] = Query(None, description="asc or desc"),
    page: Optional[str] = Query(None, description="Page number (1-based)"),
    page_size: Optional[str] = Query(None, description="Rows per page"),
) -> Dict[str, Any]:
    """
    Raw table query parameters.
    They are validated by the use case so bad values come back as field errors.
    Page size defaults to and is capped by the configured sizes.
    """
    if page_size is None:
        page_size = str(settings.default_page_size)
    elif page_size.isdigit():
        page_size = str(min(int(page_size), settings.max_page_size))

    params = {
        "search": search,
        "status": status,
        "sort_by": sort_by,
        "sort_order": sort_order,
        "page": page,
        "page_size": page_size,
    }
    return {key: value for key, value in params.items() if value is not None}


TableParams = Annotated[Dict[str, Any], Depends(table_params)]


@router.get("")
async def list_clients(
    params: TableParams,
    use_case: Annotated[ListClientsWithStatsUseCase, Depends(get_list_clients_use_case)]
):
    """
    One page of the clients table.

    - **search**: case-insensitive match on name, email or phone
    - **status**: all, active or non_active
    - **sort_by** / **sort_order**: any table column, asc or desc
    - **page** / **page_size**: 1-based page, rows per page
    """
    result = await use_case.execute(params)
    return query_response(result)


@router.get("/export")
async def export_clients(
    params: TableParams,
    use_case: Annotated[ExportClientsUseCase, Depends(get_export_clients_use_case)]
):
    """
    Download every client the table query matches, in table order, as CSV.
    """
    result = await use_case.execute(params)
    if not result.success:
        return error_response(result)

    export = result.data
    return StreamingResponse(
        iter([export.content]),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename={export.filename}"}
    )


@router.post("")
async def create_client(
    payload: Payload,
    use_case: Annotated[CreateClientUseCase, Depends(get_create_client_use_case)]
):
    """Create a new client."""
    result = await use_case.execute(payload)
    return mutation_response(result, status.HTTP_201_CREATED)


@router.post("/archive")
async def archive_clients(
    payload: Payload,
    use_case: Annotated[ArchiveClientsUseCase, Depends(get_archive_clients_use_case)]
):
    """Archive several clients at once. Body: `{"ids": [...]}`."""
    result = await use_case.execute(payload)
    return mutation_response(result)


@router.get("/{client_id}")
async def get_client(
    client_id: str,
    use_case: Annotated[GetClientDetailUseCase, Depends(get_client_detail_use_case)]
):
    """Client detail: statistics, projects and their tasks."""
    result = await use_case.execute(client_id)
    return query_response(result)


@router.put("/{client_id}")
async def update_client(
    client_id: str,
    payload: Payload,
    use_case: Annotated[UpdateClientUseCase, Depends(get_update_client_use_case)]
):
    """Replace a client's editable fields."""
    result = await use_case.execute(UpdateClientCommand(client_id=client_id, payload=payload))
    return mutation_response(result)


@router.patch("/{client_id}/status")
async def update_client_status(
    client_id: str,
    payload: Payload,
    use_case: Annotated[UpdateClientStatusUseCase, Depends(get_update_client_status_use_case)]
):
    """Switch a client between active and non_active. Body: `{"status": ...}`."""
    command = UpdateClientStatusCommand(client_id=client_id, status=payload.get("status"))
    result = await use_case.execute(command)
    return mutation_response(result)


@router.delete("/{client_id}")
async def archive_client(
    client_id: str,
    use_case: Annotated[ArchiveClientsUseCase, Depends(get_archive_clients_use_case)]
):
    """Archive one client."""
    result = await use_case.execute([client_id])
    if result.success and not result.data:
        return error_response(
            result.error_result(f"Client with id {client_id} not found", "ENTITY_NOT_FOUND")
        )
    result.id = client_id
    return mutation_response(result)


@router.post("/{client_id}/projects")
async def create_project(
    client_id: str,
    payload: Payload,
    use_case: Annotated[CreateProjectUseCase, Depends(get_create_project_use_case)]
):
    """Add a project to a client."""
    result = await use_case.execute({**payload, "client_id": client_id})
    return mutation_response(result, status.HTTP_201_CREATED)
