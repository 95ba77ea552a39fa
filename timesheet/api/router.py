"""API router aggregation: includes all endpoint modules with prefix and tags."""

from fastapi import APIRouter

from timesheet.api.endpoints import health, role_permissions

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    role_permissions.router, prefix="/role-permission", tags=["role-permissions"]
)
