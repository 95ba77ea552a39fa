"""Mapping between the RolePermission ORM entity and RolePermissionDTO. Pure, no I/O."""

from timesheet.application.dtos.role_permission import RolePermissionDTO
from timesheet.infrastructure.persistence.models.role_permission import RolePermission


def entity_to_dto(entity: RolePermission | None) -> RolePermissionDTO | None:
    """Copy the entity's fields into a DTO; None in, None out."""
    if entity is None:
        return None
    return RolePermissionDTO(
        id=entity.id,
        role_id=entity.role_id,
        permission_id=entity.permission_id,
        value_yn=entity.value_yn,
        created_by=entity.created_by,
        updated_by=entity.updated_by,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
    )


def dto_to_entity(dto: RolePermissionDTO | None) -> RolePermission | None:
    """Build a new, unsaved entity from a DTO; None in, None out.

    id is copied only when truthy, so id=0 yields a fresh insert. Audit fields
    are left for the service to stamp.
    """
    if dto is None:
        return None
    entity = RolePermission(
        role_id=dto.role_id,
        permission_id=dto.permission_id,
        value_yn=dto.value_yn,
    )
    if dto.id:
        entity.id = dto.id
    return entity
