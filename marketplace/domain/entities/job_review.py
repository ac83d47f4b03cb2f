"""Job review domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from marketplace.domain.value_objects.actor_type import ActorType

MIN_RATING = 1
MAX_RATING = 5


@dataclass
class JobReview:
    """Post-completion rating of a tradesperson's work on a job."""

    job_id: UUID
    tradesperson_id: UUID
    reviewer_type: ActorType
    reviewer_id: UUID
    rating: int
    review_text: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    reviewed_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate review data."""
        self.reviewer_type = ActorType(self.reviewer_type)
        if not self.reviewer_type.can_review():
            raise ValueError(f"{self.reviewer_type.value} cannot leave reviews")
        if isinstance(self.rating, bool) or not isinstance(self.rating, int):
            raise ValueError("Rating must be a whole number")
        if not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValueError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")

        if not self.reviewed_at:
            self.reviewed_at = datetime.now(timezone.utc)
