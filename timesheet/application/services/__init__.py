"""Application services (use-case orchestration)."""

from timesheet.application.services.role_permission_service import RolePermissionService

__all__ = ["RolePermissionService"]
