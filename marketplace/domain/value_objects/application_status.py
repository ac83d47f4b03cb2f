"""
Job application status value object.
"""

from enum import Enum


class ApplicationStatus(str, Enum):
    """Job application status enumeration."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    def is_final(self) -> bool:
        """Check if the application has been decided."""
        return self in [ApplicationStatus.ACCEPTED, ApplicationStatus.REJECTED]
