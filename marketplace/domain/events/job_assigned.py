"""
Job assigned domain event.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID


@dataclass
class JobAssigned:
    """Event raised when a tradesperson is bound to a job."""

    job_id: UUID
    tradesperson_id: UUID
    application_id: UUID
    assigned_by: str
    quotation_amount: float
    assigned_at: datetime
    previous_tradesperson_id: Optional[UUID] = None
    rejected_application_ids: List[UUID] = field(default_factory=list)

    @property
    def is_reassignment(self) -> bool:
        return self.previous_tradesperson_id is not None
