"""
Application interfaces package.
"""

from .repositories import (
    ApplicationListing,
    ClientRepositoryInterface,
    JobApplicationRepositoryInterface,
    JobListing,
    JobRepositoryInterface,
    JobReviewRepositoryInterface,
    QuoteRepositoryInterface,
    TradespersonRepositoryInterface,
)

__all__ = [
    "ApplicationListing",
    "ClientRepositoryInterface",
    "JobApplicationRepositoryInterface",
    "JobListing",
    "JobRepositoryInterface",
    "JobReviewRepositoryInterface",
    "QuoteRepositoryInterface",
    "TradespersonRepositoryInterface",
]
