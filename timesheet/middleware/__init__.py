"""HTTP middleware. Applied in main app; order matters (last added = outermost)."""

from timesheet.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
