"""
Translation of use case results into HTTP responses.
"""

from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from clientdesk.application.dto.base_dto import MutationResponseDTO
from clientdesk.application.use_cases.base_use_case import UseCaseResult


STATUS_BY_ERROR_CODE = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "DUPLICATE_ENTITY": status.HTTP_409_CONFLICT,
    "ENTITY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "DATA_ACCESS_ERROR": status.HTTP_502_BAD_GATEWAY,
}


def mutation_body(result: UseCaseResult) -> MutationResponseDTO:
    return MutationResponseDTO(
        success=result.success,
        error=result.error,
        id=result.id,
        error_code=result.error_code,
        field_errors=result.field_errors,
    )


def error_response(result: UseCaseResult) -> JSONResponse:
    status_code = STATUS_BY_ERROR_CODE.get(result.error_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse(
        status_code=status_code,
        content=mutation_body(result).model_dump(exclude_none=True)
    )


def mutation_response(result: UseCaseResult, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    """`{success, error?, id?}` with a status code matching the outcome."""
    if not result.success:
        return error_response(result)
    return JSONResponse(
        status_code=success_status,
        content=mutation_body(result).model_dump(exclude_none=True)
    )


def query_response(result: UseCaseResult) -> Any:
    """The result's data on success, otherwise the mapped error response."""
    if not result.success:
        return error_response(result)
    return JSONResponse(content=jsonable_encoder(result.data))
