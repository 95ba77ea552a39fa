"""Security helpers: JWT decoding for actor identity."""

from timesheet.infrastructure.security.jwt import (
    actor_from_token,
    create_access_token,
    verify_token,
)

__all__ = ["actor_from_token", "create_access_token", "verify_token"]
