"""
Approval action value object.
"""

from enum import Enum


class ApprovalAction(str, Enum):
    """Decision taken on a submitted quotation, quote or request."""

    APPROVE = "approve"
    REJECT = "reject"
