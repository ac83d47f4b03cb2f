"""
Application services package.
"""

from .review_recorder import ReviewRecorder
from .transitions import check_transition

__all__ = ["ReviewRecorder", "check_transition"]
