"""Core: config, exception handlers, rate limiting, and application lifespan."""

from timesheet.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
