"""Grant permissions to a role.

Usage:
    python -m scripts.seed_role_permissions <role_id> <PERMISSION_ID> [<PERMISSION_ID> ...]

Skips permissions the role already has a row for. Requires DATABASE_URL.
"""

import asyncio
import sys

from timesheet.application.dtos.role_permission import RolePermissionDTO
from timesheet.application.services.role_permission_service import (
    RolePermissionService,
)
from timesheet.core.config import get_settings
from timesheet.infrastructure.persistence import database
from timesheet.infrastructure.persistence.repositories import RolePermissionRepository
from timesheet.shared.logging import setup_logging


async def seed(role_id: int, permission_ids: list[str]) -> int:
    """Create missing grants for role_id; return how many were created."""
    settings = get_settings()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        raise SystemExit("DATABASE_URL is not configured")

    created = 0
    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            service = RolePermissionService(RolePermissionRepository(session))
            for permission_id in permission_ids:
                existing = await service.find_by_fields(
                    role_id=role_id, permission_id=permission_id
                )
                if existing is not None:
                    print(f"Role {role_id} already has {permission_id} (id={existing.id})")
                    continue
                dto = RolePermissionDTO(
                    role_id=role_id, permission_id=permission_id, value_yn=True
                )
                saved = await service.save(dto, settings.system_actor)
                print(f"Granted {permission_id} to role {role_id} (id={saved.id})")
                created += 1
    await database.dispose_engine()
    return created


async def main() -> None:
    if len(sys.argv) < 3:
        print(
            "Usage: python -m scripts.seed_role_permissions <role_id> <PERMISSION_ID>...",
            file=sys.stderr,
        )
        sys.exit(1)
    try:
        role_id = int(sys.argv[1])
    except ValueError:
        print(f"role_id must be an integer, got {sys.argv[1]!r}", file=sys.stderr)
        sys.exit(1)
    setup_logging()
    created = await seed(role_id, sys.argv[2:])
    print(f"Created {created} grant(s)")


if __name__ == "__main__":
    asyncio.run(main())
