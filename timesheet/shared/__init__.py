"""Shared utilities: request context and logging. No business logic."""

from timesheet.shared.context import get_request_id, set_request_id
from timesheet.shared.logging import get_logger, setup_logging

__all__ = ["get_logger", "get_request_id", "set_request_id", "setup_logging"]
