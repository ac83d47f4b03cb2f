"""
FastAPI application factory.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marketplace.api.middleware.error_handler import ErrorHandlerMiddleware
from marketplace.api.middleware.logging import LoggingMiddleware
from marketplace.api.middleware.rate_limiter import RateLimiterMiddleware
from marketplace.api.routes import accounts, admin, health, jobs, quotes
from marketplace.config.logging import configure_logging, get_logger
from marketplace.config.settings import settings

logger = get_logger(__name__)


def create_app(lifespan=None) -> FastAPI:
    """Create and configure FastAPI application."""
    configure_logging()

    docs_enabled = settings.DEBUG or settings.ENABLE_SWAGGER
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Jobs, applications, assignment and reviews for a tradesperson marketplace",
        openapi_url=f"{settings.API_PREFIX}/openapi.json" if docs_enabled else None,
        docs_url=f"{settings.API_PREFIX}/docs" if docs_enabled else None,
        redoc_url=f"{settings.API_PREFIX}/redoc" if docs_enabled else None,
        lifespan=lifespan,
    )

    # Add custom middleware; the last one registered runs first
    ErrorHandlerMiddleware(app)
    if settings.RATE_LIMIT_ENABLED:
        RateLimiterMiddleware(
            app,
            max_requests=settings.RATE_LIMIT_REQUESTS,
            window_seconds=settings.RATE_LIMIT_WINDOW,
            api_prefix=settings.API_PREFIX,
        )
    LoggingMiddleware(app, enable_metrics=settings.ENABLE_METRICS)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add routes
    app.include_router(health.router, prefix=settings.API_PREFIX)
    app.include_router(jobs.router, prefix=settings.API_PREFIX)
    app.include_router(admin.router, prefix=settings.API_PREFIX)
    app.include_router(accounts.router, prefix=settings.API_PREFIX)
    app.include_router(quotes.router, prefix=settings.API_PREFIX)

    logger.debug("Application created", environment=settings.ENVIRONMENT)
    return app
