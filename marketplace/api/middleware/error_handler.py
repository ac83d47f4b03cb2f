"""
Error handling middleware.
"""

import traceback

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from marketplace.api.schemas.common import ErrorResponse
from marketplace.config.logging import get_logger
from marketplace.domain.exceptions.not_found_error import NotFoundError
from marketplace.domain.exceptions.validation_error import ValidationError
from marketplace.domain.exceptions.workflow_error import (
    AuthorizationError,
    ConflictError,
    InvalidTransitionError,
)
from marketplace.infrastructure.monitoring.metrics import record_error

logger = get_logger(__name__)


def error_body(message: str, error_type: str) -> dict:
    return ErrorResponse(error=message, type=error_type).model_dump()


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return "; ".join(parts) or "Invalid request"


class ErrorHandlerMiddleware:
    """Maps domain exceptions raised by use cases to JSON error responses."""

    DOMAIN_ERRORS = (
        (ValidationError, 400, "validation_error"),
        (AuthorizationError, 403, "authorization_error"),
        (NotFoundError, 404, "not_found"),
        (ConflictError, 409, "conflict"),
        (InvalidTransitionError, 409, "invalid_transition"),
    )

    def __init__(self, app: FastAPI):
        self.app = app
        self.add_error_handlers()

    def add_error_handlers(self) -> None:
        """Add custom error handlers to FastAPI app."""
        for exc_class, status_code, error_type in self.DOMAIN_ERRORS:
            self.app.add_exception_handler(
                exc_class, self._domain_error_handler(status_code, error_type)
            )

        @self.app.exception_handler(RequestValidationError)
        async def request_validation_handler(
            request: Request, exc: RequestValidationError
        ):
            message = _describe_validation_errors(exc)
            logger.warning("Request validation failed", error=message, path=request.url.path)
            return JSONResponse(
                status_code=400, content=error_body(message, "validation_error")
            )

        @self.app.exception_handler(SQLAlchemyError)
        async def database_error_handler(request: Request, exc: SQLAlchemyError):
            logger.error("Database error", error=str(exc), path=request.url.path)
            record_error(type(exc).__name__, "database")
            return JSONResponse(
                status_code=500,
                content=error_body("A database error occurred", "database_error"),
            )

        @self.app.exception_handler(HTTPException)
        async def http_exception_handler(request: Request, exc: HTTPException):
            return JSONResponse(
                status_code=exc.status_code,
                content=error_body(str(exc.detail), "http_error"),
            )

        @self.app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception):
            logger.error(
                "Unhandled exception",
                error=str(exc),
                path=request.url.path,
                traceback=traceback.format_exc(),
            )
            record_error(type(exc).__name__, "api")
            return JSONResponse(
                status_code=500,
                content=error_body("An unexpected error occurred", "internal_error"),
            )

    @staticmethod
    def _domain_error_handler(status_code: int, error_type: str):
        async def handler(request: Request, exc: Exception):
            logger.warning(
                "Request rejected",
                error=str(exc),
                error_type=error_type,
                status_code=status_code,
                path=request.url.path,
            )
            return JSONResponse(
                status_code=status_code, content=error_body(str(exc), error_type)
            )

        return handler
