"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from timesheet.infrastructure.persistence.models.role_permission import (
        RolePermission,
    )


class IRolePermissionRepository(Protocol):
    """Protocol for the role-permission store."""

    async def get_by_id(self, entity_id: int) -> RolePermission | None:
        """Return record by primary key, or None."""

    async def find_one(self, **criteria: Any) -> RolePermission | None:
        """Return the first record matching all criteria, or None."""

    async def find(self, **criteria: Any) -> list[RolePermission]:
        """Return all records matching all criteria."""

    async def save(self, obj: RolePermission) -> RolePermission:
        """Insert (no id) or overwrite (id set); return the persisted record."""

    async def delete_by_id(self, entity_id: int) -> int:
        """Delete by primary key; return affected row count."""

    async def paginate(self, page: int, limit: int) -> tuple[list[RolePermission], int]:
        """Return a 1-based page ordered by id descending and the total count."""
