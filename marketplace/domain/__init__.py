"""
Domain package.
"""

from .entities import (
    Client,
    Job,
    JobApplication,
    JobReview,
    Quote,
    QuoteRequest,
    Tradesperson,
)
from .exceptions import (
    AuthorizationError,
    ConflictError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from .lifecycle import Allowed, JobAction, Rejected, decide
from .value_objects import (
    ActorType,
    ApplicationStatus,
    ApprovalAction,
    BudgetType,
    JobStage,
    Postcode,
    QuoteRequestStatus,
    QuoteStatus,
)

__all__ = [
    # Entities
    "Client",
    "Job",
    "JobApplication",
    "JobReview",
    "Quote",
    "QuoteRequest",
    "Tradesperson",
    # Exceptions
    "AuthorizationError",
    "ConflictError",
    "InvalidTransitionError",
    "NotFoundError",
    "ValidationError",
    # Lifecycle
    "Allowed",
    "JobAction",
    "Rejected",
    "decide",
    # Value Objects
    "ActorType",
    "ApplicationStatus",
    "ApprovalAction",
    "BudgetType",
    "JobStage",
    "Postcode",
    "QuoteRequestStatus",
    "QuoteStatus",
]
