"""
Main application entry point.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from marketplace.api.app import create_app
from marketplace.config.database import close_database_connections
from marketplace.config.logging import get_logger
from marketplace.config.settings import settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting Tradesperson Marketplace Service",
        environment=settings.ENVIRONMENT,
        version=settings.APP_VERSION,
    )
    try:
        yield
    finally:
        logger.info("Shutting down Tradesperson Marketplace Service")
        await close_database_connections()


app = create_app(lifespan=lifespan)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "marketplace.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )
