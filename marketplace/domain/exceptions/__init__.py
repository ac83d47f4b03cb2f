"""
Domain exceptions package.
"""

from .not_found_error import NotFoundError
from .validation_error import ValidationError
from .workflow_error import (
    AuthorizationError,
    ConflictError,
    InvalidTransitionError,
    WorkflowError,
)

__all__ = [
    "AuthorizationError",
    "ConflictError",
    "InvalidTransitionError",
    "NotFoundError",
    "ValidationError",
    "WorkflowError",
]
