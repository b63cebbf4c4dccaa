"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.settings import settings
from sgtax.api.routes import router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup: configure logging. Shutdown: log only, there is nothing to release."""
    logging.basicConfig(level=settings.log_level_number)
    logger.info(
        "Starting up (default_resident_eligible=%s)...",
        settings.default_resident_eligible,
    )

    yield

    logger.info("Shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="SG Tax & CPF Calculator", lifespan=lifespan)
    app.include_router(router)
    return app
