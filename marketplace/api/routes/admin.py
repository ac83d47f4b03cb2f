"""Admin API endpoints."""

from fastapi import APIRouter

from marketplace.api.dependencies import (
    ApproveJobDep,
    ApproveQuotationDep,
    AssignJobDep,
    ListApplicationsDep,
    ListTradespeopleDep,
    VerifyTradespersonDep,
)
from marketplace.api.routes.jobs import assignment_response
from marketplace.api.schemas.application import (
    ApplicationListingResponse,
    ApplicationResponse,
    ApplicationsListResponse,
    ApproveQuotationRequest,
    AssignmentResponse,
    QuotationDecisionResponse,
)
from marketplace.api.schemas.job import (
    AdminAssignJobRequest,
    ApproveJobRequest,
    JobEnvelope,
    JobResponse,
)
from marketplace.api.schemas.user import (
    TradespeopleListResponse,
    TradespersonEnvelope,
    TradespersonResponse,
    VerifyTradespersonRequest,
)
from marketplace.application.use_cases import approve_quotation, assign_job
from marketplace.config.logging import get_logger
from marketplace.domain.value_objects.actor_type import ActorType

logger = get_logger(__name__)
router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/approve-job", response_model=JobEnvelope)
async def approve_job(approval: ApproveJobRequest, use_case: ApproveJobDep):
    """Open a posted job for applications. Repeated calls are no-ops."""
    result = await use_case.execute(approval.job_id)
    message = None if result.changed else "Job was already approved"
    return JobEnvelope(job=JobResponse.model_validate(result.job), message=message)


@router.post("/assign-job", response_model=AssignmentResponse)
async def assign_job_as_admin(assign_data: AdminAssignJobRequest, use_case: AssignJobDep):
    """Admin assigns an applicant. Rejected when the client assigned the job."""
    result = await use_case.execute(
        assign_job.AssignJobRequest(
            job_id=assign_data.job_id,
            tradesperson_id=assign_data.tradesperson_id,
            assigned_by=ActorType.ADMIN,
            quotation_amount=assign_data.quotation_amount,
            quotation_notes=assign_data.quotation_notes,
        )
    )
    return assignment_response(result)


@router.post("/approve-quotation", response_model=QuotationDecisionResponse)
async def approve_quotation_endpoint(
    decision: ApproveQuotationRequest, use_case: ApproveQuotationDep
):
    """Approve (assign) or reject an application's quotation."""
    result = await use_case.execute(
        approve_quotation.ApproveQuotationRequest(
            application_id=decision.application_id,
            action=decision.action,
            approved_by=decision.approved_by,
        )
    )
    return QuotationDecisionResponse(
        action=result.action,
        job=JobResponse.model_validate(result.job),
        application=ApplicationResponse.model_validate(result.application),
        rejected_application_ids=(
            result.assignment.rejected_application_ids if result.assignment else []
        ),
    )


@router.get("/job-applications", response_model=ApplicationsListResponse)
async def all_applications(use_case: ListApplicationsDep):
    listings = await use_case.all()
    return ApplicationsListResponse(
        applications=[
            ApplicationListingResponse.from_listing(listing) for listing in listings
        ]
    )


@router.get("/tradespeople", response_model=TradespeopleListResponse)
async def list_tradespeople(use_case: ListTradespeopleDep):
    tradespeople = await use_case.execute()
    return TradespeopleListResponse(
        tradespeople=[TradespersonResponse.model_validate(t) for t in tradespeople]
    )


@router.post("/verify-tradesperson", response_model=TradespersonEnvelope)
async def verify_tradesperson(
    verification: VerifyTradespersonRequest, use_case: VerifyTradespersonDep
):
    """Mark a tradesperson's documents as checked and approve the account."""
    tradesperson = await use_case.execute(verification.tradesperson_id)
    return TradespersonEnvelope(
        tradesperson=TradespersonResponse.model_validate(tradesperson)
    )
