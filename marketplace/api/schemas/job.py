"""
Job-related API schemas.
"""

from datetime import date, datetime
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import Field

from marketplace.application.interfaces.repositories import JobListing
from marketplace.domain.value_objects.actor_type import ActorType
from marketplace.domain.value_objects.budget_type import BudgetType
from marketplace.domain.value_objects.job_stage import JobStage

from .common import BaseResponse, CamelRequest, RecordResponse
from .review import ReviewResponse
from .user import ClientResponse, TradespersonResponse


class JobPostRequest(CamelRequest):
    """Job posting request schema."""

    client_id: UUID
    trade: str = Field(..., min_length=1, max_length=100)
    job_description: str = Field(..., min_length=1, max_length=5000)
    postcode: str = Field(..., min_length=2, max_length=10)
    budget: float = Field(..., ge=0)
    budget_type: BudgetType = BudgetType.FIXED
    preferred_date: Optional[date] = None


class ApproveJobRequest(CamelRequest):
    job_id: UUID


class AdminAssignJobRequest(CamelRequest):
    """Admin assignment request schema."""

    job_id: UUID
    tradesperson_id: UUID
    quotation_amount: Optional[float] = Field(None, gt=0)
    quotation_notes: Optional[str] = Field(None, max_length=5000)


class ClientAssignJobRequest(AdminAssignJobRequest):
    """Client assignment request schema."""

    assigned_by: Literal["client"] = "client"
    client_id: Optional[UUID] = None


class RatingItem(CamelRequest):
    tradesperson_id: UUID
    rating: int
    review: Optional[str] = Field(None, max_length=5000)


class CompleteJobRequest(CamelRequest):
    """Job completion request schema, optionally carrying ratings."""

    job_id: UUID
    completed_by: ActorType = ActorType.CLIENT
    reviewer_type: Optional[ActorType] = None
    reviewer_id: Optional[UUID] = None
    ratings: List[RatingItem] = Field(default_factory=list)


class JobResponse(RecordResponse):
    """Job response schema."""

    id: UUID
    client_id: UUID
    trade: str
    description: str
    postcode: str
    budget: float
    budget_type: BudgetType
    preferred_date: Optional[date] = None
    status: JobStage = Field(..., description="Current lifecycle stage")
    is_approved: bool
    approved_at: Optional[datetime] = None
    assigned_tradesperson_id: Optional[UUID] = None
    assigned_by: Optional[ActorType] = None
    assigned_at: Optional[datetime] = None
    quotation_amount: Optional[float] = None
    quotation_notes: Optional[str] = None
    is_completed: bool
    completed_at: Optional[datetime] = None
    completed_by: Optional[ActorType] = None
    created_at: datetime
    updated_at: datetime


class JobListingResponse(JobResponse):
    """Job with the client, assigned tradesperson and reviews."""

    client: Optional[ClientResponse] = None
    tradesperson: Optional[TradespersonResponse] = None
    reviews: List[ReviewResponse] = Field(default_factory=list)

    @classmethod
    def from_listing(cls, listing: JobListing) -> "JobListingResponse":
        return cls(
            **JobResponse.model_validate(listing.job).model_dump(),
            client=(
                ClientResponse.model_validate(listing.client) if listing.client else None
            ),
            tradesperson=(
                TradespersonResponse.model_validate(listing.tradesperson)
                if listing.tradesperson
                else None
            ),
            reviews=[ReviewResponse.model_validate(r) for r in listing.reviews],
        )


class JobEnvelope(BaseResponse):
    job: JobResponse


class JobsListResponse(BaseResponse):
    jobs: List[JobListingResponse]


class AvailableJobsResponse(BaseResponse):
    jobs: List[JobResponse]


class CompleteJobResponse(BaseResponse):
    job: JobResponse
    reviews: List[ReviewResponse] = Field(default_factory=list)


class RateTradespersonResponse(BaseResponse):
    review: ReviewResponse
    job: JobResponse
