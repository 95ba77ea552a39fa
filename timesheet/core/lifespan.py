"""Application lifespan: startup and shutdown.

Startup configures logging; shutdown disposes the SQL engine if one was
created during the process lifetime.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from timesheet.core.config import get_settings
from timesheet.infrastructure.persistence import database
from timesheet.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown."""
    settings = get_settings()
    setup_logging()
    if not settings.database_url:
        logger.warning("DATABASE_URL is not set; role-permission endpoints will return 503")
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    await database.dispose_engine()
    logger.info("%s shutdown complete", settings.app_name)
