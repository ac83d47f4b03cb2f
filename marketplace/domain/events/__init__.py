"""
Domain events package.
"""

from .job_assigned import JobAssigned
from .job_completed import JobCompleted

__all__ = [
    "JobAssigned",
    "JobCompleted",
]
