"""
Job lifecycle stage value object.
"""

from enum import Enum
from typing import List


class JobStage(str, Enum):
    """Job lifecycle stage enumeration.

    Stored in the ``jobs.status`` column next to the individual flags so that
    listings can filter on a single value.
    """

    PENDING_APPROVAL = "pending_approval"
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    REVIEWED = "reviewed"

    def is_visible_to_tradespeople(self) -> bool:
        """Check if the job shows up in available-jobs listings."""
        return self == JobStage.OPEN

    def is_assigned(self) -> bool:
        """Check if a tradesperson has been bound to the job."""
        return self in [JobStage.IN_PROGRESS, JobStage.COMPLETED, JobStage.REVIEWED]

    def is_final(self) -> bool:
        """Check if the job no longer accepts application changes."""
        return self in [JobStage.COMPLETED, JobStage.REVIEWED]

    def listed_stages(self) -> List["JobStage"]:
        """Stages a listing filtered on this stage returns.

        A reviewed job is still a completed one.
        """
        if self == JobStage.COMPLETED:
            return [JobStage.COMPLETED, JobStage.REVIEWED]
        return [self]
