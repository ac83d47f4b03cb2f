"""
Job completed domain event.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class JobCompleted:
    """Event raised when a client or admin closes out an assigned job."""

    job_id: UUID
    tradesperson_id: UUID
    completed_by: str
    completed_at: datetime
    reviews_recorded: int = 0
