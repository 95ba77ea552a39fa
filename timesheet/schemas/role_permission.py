"""Role-permission API schemas. JSON fields are camelCase; attributes are snake_case."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt
from pydantic.alias_generators import to_camel

from timesheet.application.dtos.pagination import Page, PaginationMeta
from timesheet.application.dtos.role_permission import RolePermissionDTO


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RolePermissionRequest(_CamelModel):
    """Request body for create and update. Unknown fields and coercible strings are rejected."""

    model_config = ConfigDict(extra="forbid")

    id: StrictInt | None = Field(default=None, description="Path id wins on update")
    role_id: StrictInt = Field(..., description="Role ID field")
    permission_id: str = Field(..., min_length=1, max_length=128, description="Permission ID field")
    value_yn: StrictBool = Field(..., description="Permission value (yes/no)")

    def to_dto(self) -> RolePermissionDTO:
        return RolePermissionDTO(
            id=self.id,
            role_id=self.role_id,
            permission_id=self.permission_id,
            value_yn=self.value_yn,
        )


class RolePermissionResponse(_CamelModel):
    """Role-permission list/detail response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    role_id: int
    permission_id: str
    value_yn: bool
    created_by: str | None = None
    updated_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PaginationMetaResponse(_CamelModel):
    model_config = ConfigDict(from_attributes=True)

    total_items: int
    item_count: int
    items_per_page: int
    total_pages: int
    current_page: int


class RolePermissionPage(_CamelModel):
    """Paginated list response: items plus meta."""

    items: list[RolePermissionResponse]
    meta: PaginationMetaResponse

    @classmethod
    def from_page(cls, page: Page[RolePermissionDTO]) -> "RolePermissionPage":
        meta: PaginationMeta = page.meta
        return cls(
            items=[RolePermissionResponse.model_validate(item) for item in page.items],
            meta=PaginationMetaResponse.model_validate(meta),
        )


class MessageResponse(BaseModel):
    """Envelope with a message only (delete success, create/delete failure)."""

    message: str


class RolePermissionEnvelope(BaseModel):
    """Envelope returned by create and update on success."""

    message: str
    data: RolePermissionResponse


class UpdateFailureResponse(BaseModel):
    """Envelope returned by update on failure."""

    success: bool = False
    message: str
    status_code: int = Field(..., serialization_alias="statusCode")
