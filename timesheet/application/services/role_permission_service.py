"""Role-permission application service: lookup, pagination, create, update, delete.

The single place where storage faults are classified: TimesheetException
subclasses propagate with their own status, anything else becomes
InternalErrorException. Audit actors are explicit parameters, never ambient.
"""

from __future__ import annotations

from typing import Any, NoReturn

from timesheet.application.dtos.pagination import Page, PaginationMeta
from timesheet.application.dtos.role_permission import RolePermissionDTO
from timesheet.application.interfaces.repositories import IRolePermissionRepository
from timesheet.application.mappers.role_permission import dto_to_entity, entity_to_dto
from timesheet.domain.exceptions import (
    BadRequestException,
    InternalErrorException,
    ResourceNotFoundException,
    TimesheetException,
)
from timesheet.shared.logging import get_logger

logger = get_logger(__name__)

_RESOURCE = "role_permission"
_MSG_NOT_FOUND = "Role permission not found"
_MSG_ID_REQUIRED = "ID is required for update"
_MSG_CONVERSION_FAILED = "Failed to convert DTO to entity"


def _reraise(exc: Exception, action: str) -> NoReturn:
    """Log a failed operation and raise it as a TimesheetException."""
    if isinstance(exc, TimesheetException):
        logger.error("Failed to %s: %s", action, exc.message)
        raise exc
    logger.exception("Failed to %s", action)
    raise InternalErrorException(str(exc) or "Internal server error") from exc


class RolePermissionService:
    """CRUD and pagination over role-permission grants."""

    def __init__(self, repo: IRolePermissionRepository) -> None:
        self._repo = repo

    async def find_by_id(self, entity_id: int) -> RolePermissionDTO:
        """Return the record with this id. Raises ResourceNotFoundException if absent."""
        try:
            logger.info("Finding role permission by id: %s", entity_id)
            entity = await self._repo.get_by_id(entity_id)
            if entity is None:
                raise ResourceNotFoundException(_MSG_NOT_FOUND, _RESOURCE, entity_id)
            logger.info("Successfully found role permission with id: %s", entity_id)
            return entity_to_dto(entity)
        except Exception as e:
            _reraise(e, "find role permission by id")

    async def find_by_fields(self, **criteria: Any) -> RolePermissionDTO | None:
        """Return the first record matching criteria, or None (absence is not an error)."""
        try:
            logger.info("Finding role permission by fields: %s", criteria)
            entity = await self._repo.find_one(**criteria)
            if entity is None:
                return None
            logger.info("Successfully found role permission by fields")
            return entity_to_dto(entity)
        except Exception as e:
            _reraise(e, "find role permission by fields")

    async def find_and_count(self, page: int, limit: int) -> Page[RolePermissionDTO]:
        """Return one page (1-based) ordered by id descending with pagination metadata.

        Callers are responsible for defaulting and clamping page and limit.
        """
        try:
            logger.info(
                "Finding and counting role permissions with page=%s limit=%s",
                page,
                limit,
            )
            entities, total = await self._repo.paginate(page, limit)
            items = [dto for dto in map(entity_to_dto, entities) if dto is not None]
            meta = PaginationMeta.build(
                total_items=total, item_count=len(items), page=page, limit=limit
            )
            logger.info("Successfully found %s role permissions", meta.total_items)
            return Page(items=items, meta=meta)
        except Exception as e:
            _reraise(e, "find and count role permissions")

    async def save(
        self, dto: RolePermissionDTO, creator: str | None = None
    ) -> RolePermissionDTO:
        """Persist a new record; stamp created_by (if unset) and updated_by when creator is given."""
        try:
            logger.info("Saving new role permission")
            entity = dto_to_entity(dto)
            if entity is None:
                raise InternalErrorException(_MSG_CONVERSION_FAILED)
            if creator:
                if not entity.created_by:
                    entity.created_by = creator
                entity.updated_by = creator
            result = await self._repo.save(entity)
            logger.info("Successfully saved role permission with id: %s", result.id)
            return entity_to_dto(result)
        except Exception as e:
            _reraise(e, "save role permission")

    async def update(
        self,
        dto: RolePermissionDTO,
        updater: str | None = None,
        entity_id: int | None = None,
    ) -> RolePermissionDTO:
        """Overwrite the record with entity_id using dto's fields (no field-level merge).

        The existence check and the write are separate statements; a concurrent
        delete between them is not detected.
        """
        try:
            logger.info("Updating role permission with id: %s", entity_id)
            if not entity_id:
                raise BadRequestException(_MSG_ID_REQUIRED)
            existing = await self._repo.get_by_id(entity_id)
            if existing is None:
                raise ResourceNotFoundException(_MSG_NOT_FOUND, _RESOURCE, entity_id)
            entity = dto_to_entity(dto)
            if entity is None:
                raise InternalErrorException(_MSG_CONVERSION_FAILED)
            entity.id = entity_id
            if updater:
                entity.updated_by = updater
            result = await self._repo.save(entity)
            logger.info("Successfully updated role permission with id: %s", entity_id)
            return entity_to_dto(result)
        except Exception as e:
            _reraise(e, "update role permission")

    async def delete_by_id(self, entity_id: int) -> None:
        """Delete by id. Raises ResourceNotFoundException when no row was affected."""
        try:
            logger.info("Deleting role permission with id: %s", entity_id)
            affected = await self._repo.delete_by_id(entity_id)
            if affected == 0:
                raise ResourceNotFoundException(_MSG_NOT_FOUND, _RESOURCE, entity_id)
            logger.info("Successfully deleted role permission with id: %s", entity_id)
        except Exception as e:
            _reraise(e, "delete role permission")

    async def find_by_role_id(self, role_id: int) -> list[RolePermissionDTO]:
        """Return every grant for role_id in storage order; empty list when none."""
        try:
            logger.info("Finding permissions for role ID: %s", role_id)
            entities = await self._repo.find(role_id=role_id)
            dtos = [dto for dto in map(entity_to_dto, entities) if dto is not None]
            logger.info(
                "Successfully found %s permissions for role ID %s", len(dtos), role_id
            )
            return dtos
        except Exception as e:
            _reraise(e, f"find permissions for role ID {role_id}")
