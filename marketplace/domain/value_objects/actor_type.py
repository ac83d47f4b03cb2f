"""
Actor type value object.
"""

from enum import Enum


class ActorType(str, Enum):
    """Roles that can trigger changes to marketplace records."""

    CLIENT = "client"
    ADMIN = "admin"
    TRADESPERSON = "tradesperson"

    def can_assign(self) -> bool:
        """Check if the actor may bind a tradesperson to a job."""
        return self in [ActorType.CLIENT, ActorType.ADMIN]

    def can_review(self) -> bool:
        """Check if the actor may leave a review on a completed job."""
        return self in [ActorType.CLIENT, ActorType.TRADESPERSON]
