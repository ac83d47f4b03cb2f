"""
Database models package.
"""

from .base import Base, BaseModel
from .client import ClientModel
from .job import JobModel
from .job_application import JobApplicationModel
from .job_review import JobReviewModel
from .quote import QuoteModel, QuoteRequestModel
from .tradesperson import TradespersonModel

__all__ = [
    "Base",
    "BaseModel",
    "ClientModel",
    "JobModel",
    "JobApplicationModel",
    "JobReviewModel",
    "QuoteModel",
    "QuoteRequestModel",
    "TradespersonModel",
]
