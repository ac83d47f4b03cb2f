"""
Budget type value object.
"""

from enum import Enum


class BudgetType(str, Enum):
    """How a client expresses the budget of a job."""

    FIXED = "fixed"
    HOURLY = "hourly"
    NEGOTIABLE = "negotiable"
