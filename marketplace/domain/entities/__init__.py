"""
Domain entities package.
"""

from .client import Client
from .job import Job
from .job_application import JobApplication
from .job_review import JobReview
from .quote_request import Quote, QuoteRequest
from .tradesperson import Tradesperson

__all__ = [
    "Client",
    "Job",
    "JobApplication",
    "JobReview",
    "Quote",
    "QuoteRequest",
    "Tradesperson",
]
