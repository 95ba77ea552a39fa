"""Application ports (Protocols) implemented by infrastructure."""

from timesheet.application.interfaces.repositories import IRolePermissionRepository

__all__ = ["IRolePermissionRepository"]
