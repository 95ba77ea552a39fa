"""Pytest configuration and fixtures for the role-permission service.

Environment is pinned before timesheet.main is imported: the app object is
built at import time from get_settings(). HTTP tests run the real app with the
service dependencies overridden by an in-memory repository; DB-dependent
fixtures use timesheet.infrastructure.persistence.database.
"""

import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-actor-tokens")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from timesheet.api.dependencies import (  # noqa: E402
    get_role_permission_service,
    get_role_permission_service_for_write,
)
from timesheet.application.services.role_permission_service import (  # noqa: E402
    RolePermissionService,
)
from timesheet.infrastructure.persistence import database  # noqa: E402
from timesheet.infrastructure.security.jwt import create_access_token  # noqa: E402
from timesheet.main import app  # noqa: E402
from tests.fakes import InMemoryRolePermissionRepository  # noqa: E402


ROLE_PERMISSION_URL = "/api/role-permission"


@pytest.fixture
def repo() -> InMemoryRolePermissionRepository:
    """Empty in-memory role-permission store."""
    return InMemoryRolePermissionRepository()


@pytest.fixture
async def client(repo: InMemoryRolePermissionRepository) -> AsyncClient:
    """Async HTTP client against the app, with services backed by `repo`."""
    service = RolePermissionService(repo)
    app.dependency_overrides[get_role_permission_service] = lambda: service
    app.dependency_overrides[get_role_permission_service_for_write] = lambda: service
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
async def raw_client() -> AsyncClient:
    """Async HTTP client against the app with its real (database) dependencies."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers():
    """Build bearer headers for a token carrying the given claims."""

    def _headers(**claims: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(claims)}"}

    return _headers


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository tests. Rolls back after the test.

    Skips when DATABASE_URL is not set. The database must be migrated:
    alembic upgrade head.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: alembic upgrade head"
        )
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
    await database.dispose_engine()
