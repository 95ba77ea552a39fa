"""Role-permission API: paginated list, get by id, list by role, create, update, delete.

Create, update and delete render their own JSON envelopes (shapes differ per
endpoint and clients depend on them); the read endpoints raise domain
exceptions and leave rendering to the registered exception handlers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from timesheet.api.dependencies import (
    get_current_actor,
    get_role_permission_service,
    get_role_permission_service_for_write,
)
from timesheet.application.services.role_permission_service import (
    RolePermissionService,
)
from timesheet.core.config import get_settings
from timesheet.core.limiter import limit_writes
from timesheet.domain.exceptions import (
    BadRequestException,
    ResourceNotFoundException,
    TimesheetException,
)
from timesheet.schemas.role_permission import (
    MessageResponse,
    RolePermissionEnvelope,
    RolePermissionPage,
    RolePermissionRequest,
    RolePermissionResponse,
    UpdateFailureResponse,
)
from timesheet.shared.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()

ReadService = Annotated[RolePermissionService, Depends(get_role_permission_service)]
WriteService = Annotated[
    RolePermissionService, Depends(get_role_permission_service_for_write)
]
Actor = Annotated[str, Depends(get_current_actor)]


def _envelope(message: str, data: object, status_code: int) -> JSONResponse:
    body = RolePermissionEnvelope(
        message=message, data=RolePermissionResponse.model_validate(data)
    )
    return JSONResponse(
        status_code=status_code, content=body.model_dump(mode="json", by_alias=True)
    )


@router.get(
    "/all",
    response_model=RolePermissionPage,
    summary="Get all role permissions with pagination",
)
async def list_role_permissions(
    service: ReadService,
    page: Annotated[int, Query(description="Zero-based page number")] = 0,
    limit: Annotated[int | None, Query(description="Page size, capped by the server")] = None,
) -> RolePermissionPage:
    """List role permissions newest first. Empty result is reported as 404."""
    settings = get_settings()
    logger.info("Fetching all role permissions with pagination")
    if page < 0:
        raise BadRequestException("Page number cannot be negative")
    if limit is None:
        limit = settings.default_page_size
    if limit < 1:
        raise BadRequestException("Limit must be a positive number")

    result = await service.find_and_count(page + 1, min(limit, settings.max_page_size))
    if not result.items:
        logger.warning("No role permissions found")
        raise ResourceNotFoundException("No records found", "role_permission")

    logger.info("Successfully fetched %s role permissions", result.meta.total_items)
    return RolePermissionPage.from_page(result)


@router.get(
    "/role/{role_id}",
    response_model=list[RolePermissionResponse],
    summary="Get permissions by role ID",
)
async def list_role_permissions_for_role(
    role_id: int,
    service: ReadService,
) -> list[RolePermissionResponse]:
    """Return every grant for the role; an empty list is a valid result."""
    dtos = await service.find_by_role_id(role_id)
    return [RolePermissionResponse.model_validate(dto) for dto in dtos]


@router.get(
    "/{role_permission_id}",
    response_model=RolePermissionResponse,
    summary="Get role permission by ID",
)
async def get_role_permission(
    role_permission_id: int,
    service: ReadService,
) -> RolePermissionResponse:
    """Get one role permission or 404."""
    dto = await service.find_by_id(role_permission_id)
    return RolePermissionResponse.model_validate(dto)


@router.post(
    "",
    status_code=201,
    response_model=RolePermissionEnvelope,
    responses={"4XX": {"model": MessageResponse}, "5XX": {"model": MessageResponse}},
    summary="Create role permission",
)
@limit_writes
async def create_role_permission(
    request: Request,
    body: RolePermissionRequest,
    service: WriteService,
    actor: Actor,
) -> JSONResponse:
    """Create a role permission stamped with the acting user."""
    try:
        created = await service.save(body.to_dto(), actor)
    except TimesheetException as e:
        logger.error("Error creating role permission: %s", e.message)
        return JSONResponse(
            status_code=e.status_code,
            content=MessageResponse(message=e.message).model_dump(),
        )
    return _envelope("Role permission created successfully", created, 201)


@router.put(
    "/{role_permission_id}",
    response_model=RolePermissionEnvelope,
    responses={
        "4XX": {"model": UpdateFailureResponse},
        "5XX": {"model": UpdateFailureResponse},
    },
    summary="Update role permission with id",
)
@limit_writes
async def update_role_permission(
    request: Request,
    role_permission_id: int,
    body: RolePermissionRequest,
    service: WriteService,
    actor: Actor,
) -> JSONResponse:
    """Replace the stored fields of a role permission (no partial merge)."""
    try:
        updated = await service.update(body.to_dto(), actor, role_permission_id)
    except TimesheetException as e:
        logger.error("Error occurred during role permission update: %s", e.message)
        failure = UpdateFailureResponse(message=e.message, status_code=e.status_code)
        return JSONResponse(
            status_code=e.status_code,
            content=failure.model_dump(by_alias=True),
        )
    return _envelope("Role permission updated successfully", updated, 200)


@router.delete(
    "/{role_permission_id}",
    response_model=MessageResponse,
    responses={404: {"model": MessageResponse}, 500: {"model": MessageResponse}},
    summary="Delete role permission",
)
@limit_writes
async def delete_role_permission(
    request: Request,
    role_permission_id: int,
    service: WriteService,
) -> JSONResponse:
    """Delete by id. Any failure other than not-found is reported as a generic 500."""
    try:
        await service.delete_by_id(role_permission_id)
    except ResourceNotFoundException as e:
        logger.error(
            "Failed to delete role permission with ID %s: %s", role_permission_id, e.message
        )
        return JSONResponse(status_code=404, content={"message": "Record not found"})
    except TimesheetException as e:
        logger.error(
            "Failed to delete role permission with ID %s: %s", role_permission_id, e.message
        )
        return JSONResponse(status_code=500, content={"message": "Internal server error"})
    return JSONResponse(
        status_code=200, content={"message": "Role permission deleted successfully"}
    )
