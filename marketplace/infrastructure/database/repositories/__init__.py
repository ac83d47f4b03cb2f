"""Repository implementations."""

from .client_repository import ClientRepository
from .job_application_repository import JobApplicationRepository
from .job_repository import JobRepository
from .job_review_repository import JobReviewRepository
from .quote_repository import QuoteRepository
from .tradesperson_repository import TradespersonRepository
from .transaction_repository import TransactionService

__all__ = [
    "ClientRepository",
    "JobApplicationRepository",
    "JobRepository",
    "JobReviewRepository",
    "QuoteRepository",
    "TradespersonRepository",
    "TransactionService",
]
