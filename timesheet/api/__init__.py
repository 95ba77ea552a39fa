"""HTTP API: routers, endpoints, and FastAPI dependencies."""

from timesheet.api.router import api_router

__all__ = ["api_router"]
