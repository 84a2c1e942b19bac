"""Application lifespan: startup and shutdown.

Wiring only: logging, SQLAlchemy instrumentation when telemetry is on,
telemetry flush and engine dispose on shutdown.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.infrastructure.persistence import database
from app.shared.telemetry.logging import setup_logging
from app.shared.telemetry.telemetry import get_telemetry, set_telemetry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    The tracer provider itself is created in create_app() (FastAPI
    instrumentation must happen before the app starts).
    """
    setup_logging()

    telemetry = get_telemetry()
    if telemetry is not None:
        telemetry.instrument_sqlalchemy(database.get_engine())

    logger.info("Application startup complete")

    yield

    if telemetry is not None:
        telemetry.shutdown()
        set_telemetry(None)

    await database.dispose_engine()
