"""Persistence models: ORM entities and mixins."""

from timesheet.infrastructure.persistence.models.mixins import (
    TimestampMixin,
    UserAuditMixin,
)
from timesheet.infrastructure.persistence.models.role_permission import RolePermission

__all__ = ["RolePermission", "TimestampMixin", "UserAuditMixin"]
