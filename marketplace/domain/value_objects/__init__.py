"""
Domain value objects package.
"""

from .actor_type import ActorType
from .application_status import ApplicationStatus
from .approval_action import ApprovalAction
from .budget_type import BudgetType
from .job_stage import JobStage
from .postcode import Postcode
from .quote_status import QuoteRequestStatus, QuoteStatus

__all__ = [
    "ActorType",
    "ApplicationStatus",
    "ApprovalAction",
    "BudgetType",
    "JobStage",
    "Postcode",
    "QuoteRequestStatus",
    "QuoteStatus",
]
