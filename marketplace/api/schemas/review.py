"""
Review API schemas.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from marketplace.domain.value_objects.actor_type import ActorType

from .common import CamelRequest, RecordResponse


class RateTradespersonRequest(CamelRequest):
    """Rating request schema."""

    job_id: UUID
    tradesperson_id: UUID
    rating: int
    review: Optional[str] = Field(None, max_length=5000)
    reviewer_type: ActorType = ActorType.CLIENT
    reviewer_id: Optional[UUID] = None


class ReviewResponse(RecordResponse):
    """Review response schema."""

    id: UUID
    job_id: UUID
    tradesperson_id: UUID
    reviewer_type: ActorType
    reviewer_id: UUID
    rating: int
    review_text: Optional[str] = None
    reviewed_at: datetime
