"""FastAPI dependencies (composition root): sessions, repositories, services, actor."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from timesheet.application.services.role_permission_service import (
    RolePermissionService,
)
from timesheet.core.config import get_settings
from timesheet.infrastructure.persistence.database import get_db, get_db_transactional
from timesheet.infrastructure.persistence.repositories import RolePermissionRepository
from timesheet.infrastructure.security.jwt import actor_from_token

_http_bearer = HTTPBearer(auto_error=False)


async def get_role_permission_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RolePermissionRepository:
    """Role-permission repository for read operations."""
    return RolePermissionRepository(db)


async def get_role_permission_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> RolePermissionRepository:
    """Role-permission repository for create/update/delete (transactional)."""
    return RolePermissionRepository(db)


def get_role_permission_service(
    repo: Annotated[RolePermissionRepository, Depends(get_role_permission_repo)],
) -> RolePermissionService:
    """Role-permission service for reads."""
    return RolePermissionService(repo)


def get_role_permission_service_for_write(
    repo: Annotated[
        RolePermissionRepository, Depends(get_role_permission_repo_for_write)
    ],
) -> RolePermissionService:
    """Role-permission service bound to a transactional session."""
    return RolePermissionService(repo)


async def get_current_actor(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> str:
    """Return the caller's login from an optional bearer token, else the system actor.

    A missing or invalid token is not rejected; it only loses attribution.
    """
    if credentials:
        actor = actor_from_token(credentials.credentials)
        if actor:
            return actor
    return get_settings().system_actor
