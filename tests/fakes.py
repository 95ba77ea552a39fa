"""In-memory role-permission store for API and service tests (no database)."""

from datetime import UTC, datetime
from typing import Any, Iterator

from timesheet.infrastructure.persistence.models.role_permission import RolePermission

_MERGED_COLUMNS = ("role_id", "permission_id", "value_yn", "created_by", "updated_by")


class InMemoryRolePermissionRepository:
    """Implements IRolePermissionRepository over a dict keyed by id.

    save() inserts when the id is None or unknown. Otherwise it copies each
    data or audit column of the incoming object that is not None onto the
    stored row; unlike Session.merge, an explicit None never clears a column.
    """

    def __init__(self) -> None:
        self.rows: dict[int, RolePermission] = {}
        self._next_id = 1

    def _matching(self, criteria: dict[str, Any]) -> Iterator[RolePermission]:
        for row in self.rows.values():
            if all(getattr(row, key) == value for key, value in criteria.items()):
                yield row

    async def get_by_id(self, entity_id: int) -> RolePermission | None:
        return self.rows.get(entity_id)

    async def find_one(self, **criteria: Any) -> RolePermission | None:
        return next(self._matching(criteria), None)

    async def find(self, **criteria: Any) -> list[RolePermission]:
        return list(self._matching(criteria))

    async def save(self, obj: RolePermission) -> RolePermission:
        now = datetime.now(UTC)
        if obj.id is None or obj.id not in self.rows:
            if obj.id is None:
                obj.id = self._next_id
            self._next_id = max(self._next_id, obj.id) + 1
            obj.created_at = now
        else:
            stored = self.rows[obj.id]
            for column in _MERGED_COLUMNS:
                value = getattr(obj, column)
                if value is not None:
                    setattr(stored, column, value)
            obj = stored
        obj.updated_at = now
        self.rows[obj.id] = obj
        return obj

    async def delete_by_id(self, entity_id: int) -> int:
        return 0 if self.rows.pop(entity_id, None) is None else 1

    async def paginate(self, page: int, limit: int) -> tuple[list[RolePermission], int]:
        ordered = sorted(self.rows.values(), key=lambda row: row.id, reverse=True)
        start = (page - 1) * limit
        return ordered[start : start + limit], len(ordered)
