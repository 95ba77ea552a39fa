"""Application DTOs (no dependency on ORM or HTTP)."""

from timesheet.application.dtos.pagination import Page, PaginationMeta
from timesheet.application.dtos.role_permission import RolePermissionDTO

__all__ = ["Page", "PaginationMeta", "RolePermissionDTO"]
