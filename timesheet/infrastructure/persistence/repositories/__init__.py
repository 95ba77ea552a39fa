"""Persistence repositories. Re-exports for dependency injection."""

from timesheet.infrastructure.persistence.repositories.base import BaseRepository
from timesheet.infrastructure.persistence.repositories.role_permission_repo import (
    RolePermissionRepository,
)

__all__ = ["BaseRepository", "RolePermissionRepository"]
