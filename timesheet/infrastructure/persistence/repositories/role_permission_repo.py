"""RolePermission repository: role-permission grants (single entity responsibility)."""

from sqlalchemy.ext.asyncio import AsyncSession

from timesheet.infrastructure.persistence.models.role_permission import RolePermission
from timesheet.infrastructure.persistence.repositories.base import BaseRepository


class RolePermissionRepository(BaseRepository[RolePermission]):
    """Grants and explicit denials per role. Generic CRUD and pagination come from the base."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, RolePermission)
