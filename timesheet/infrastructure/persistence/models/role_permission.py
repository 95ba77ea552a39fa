"""RolePermission ORM model: one grant or explicit denial of a permission for a role."""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from timesheet.infrastructure.persistence.database import Base
from timesheet.infrastructure.persistence.models.mixins import UserAuditMixin


class RolePermission(UserAuditMixin, Base):
    """Table: role_permission. No uniqueness on (role_id, permission_id)."""

    __tablename__ = "role_permission"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    role_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    permission_id: Mapped[str] = mapped_column(String(128), nullable=False)
    value_yn: Mapped[bool] = mapped_column(Boolean, nullable=False)

    def __repr__(self) -> str:
        return (
            f"RolePermission(id={self.id!r}, role_id={self.role_id!r}, "
            f"permission_id={self.permission_id!r}, value_yn={self.value_yn!r})"
        )
