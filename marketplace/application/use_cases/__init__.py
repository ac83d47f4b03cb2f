"""
Application use cases package.
"""

from .accounts import (
    ListTradespeopleUseCase,
    RegisterClientUseCase,
    RegisterTradespersonUseCase,
    VerifyTradespersonUseCase,
)
from .apply_to_job import ApplyToJobUseCase
from .approve_job import ApproveJobUseCase
from .approve_quotation import ApproveQuotationUseCase
from .assign_job import AssignJobUseCase
from .complete_job import CompleteJobUseCase
from .listings import AvailableJobsUseCase, ListApplicationsUseCase, ListJobsUseCase
from .post_job import PostJobUseCase
from .quotes import QuotePipeline
from .rate_tradesperson import RateTradespersonUseCase

__all__ = [
    "ApplyToJobUseCase",
    "ApproveJobUseCase",
    "ApproveQuotationUseCase",
    "AssignJobUseCase",
    "AvailableJobsUseCase",
    "CompleteJobUseCase",
    "ListApplicationsUseCase",
    "ListJobsUseCase",
    "ListTradespeopleUseCase",
    "PostJobUseCase",
    "QuotePipeline",
    "RateTradespersonUseCase",
    "RegisterClientUseCase",
    "RegisterTradespersonUseCase",
    "VerifyTradespersonUseCase",
]
