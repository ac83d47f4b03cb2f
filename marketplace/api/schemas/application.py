"""
Job application API schemas.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from marketplace.application.interfaces.repositories import ApplicationListing
from marketplace.domain.value_objects.actor_type import ActorType
from marketplace.domain.value_objects.application_status import ApplicationStatus
from marketplace.domain.value_objects.approval_action import ApprovalAction

from .common import BaseResponse, CamelRequest, RecordResponse
from .job import JobResponse
from .user import TradespersonResponse


class ApplyToJobRequest(CamelRequest):
    """Job application request schema."""

    job_id: UUID
    tradesperson_id: UUID
    quotation_amount: float
    quotation_notes: Optional[str] = Field(None, max_length=5000)


class ApproveQuotationRequest(CamelRequest):
    """Quotation decision request schema."""

    application_id: UUID
    action: ApprovalAction
    approved_by: ActorType = ActorType.ADMIN


class ApplicationResponse(RecordResponse):
    """Job application response schema."""

    id: UUID
    job_id: UUID
    tradesperson_id: UUID
    quotation_amount: float
    quotation_notes: Optional[str] = None
    status: ApplicationStatus
    applied_at: datetime
    updated_at: datetime


class ApplicationListingResponse(ApplicationResponse):
    """Application with its job and tradesperson."""

    job: Optional[JobResponse] = None
    tradesperson: Optional[TradespersonResponse] = None

    @classmethod
    def from_listing(cls, listing: ApplicationListing) -> "ApplicationListingResponse":
        return cls(
            **ApplicationResponse.model_validate(listing.application).model_dump(),
            job=JobResponse.model_validate(listing.job) if listing.job else None,
            tradesperson=(
                TradespersonResponse.model_validate(listing.tradesperson)
                if listing.tradesperson
                else None
            ),
        )


class ApplicationEnvelope(BaseResponse):
    application: ApplicationResponse


class ApplicationsListResponse(BaseResponse):
    applications: List[ApplicationListingResponse]


class AssignmentResponse(BaseResponse):
    """Records touched by an assignment."""

    job: JobResponse
    application: ApplicationResponse
    rejected_application_ids: List[UUID] = Field(default_factory=list)
    reassigned: bool = False


class QuotationDecisionResponse(BaseResponse):
    action: ApprovalAction
    job: JobResponse
    application: ApplicationResponse
    rejected_application_ids: List[UUID] = Field(default_factory=list)
