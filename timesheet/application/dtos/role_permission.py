"""DTOs for role-permission use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RolePermissionDTO:
    """Role-permission transfer object.

    id is None before creation. The audit fields are filled only on results
    read back from storage; they are never taken from a caller's DTO.
    """

    role_id: int
    permission_id: str
    value_yn: bool
    id: int | None = None
    created_by: str | None = None
    updated_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
