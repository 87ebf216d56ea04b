from contextlib import asynccontextmanager
from fastapi import FastAPI

from app.core.config import settings
from app.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """
    Lifespan function for the FastAPI application.
    Configures logging on startup; the assessment pipeline holds no resources.
    """
    setup_logging(settings.LOG_LEVEL)
    logger.info("%s started", settings.PROJECT_NAME)

    yield

    logger.info("%s stopped", settings.PROJECT_NAME)
