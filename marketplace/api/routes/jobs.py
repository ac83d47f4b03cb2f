"""Job-related API endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from marketplace.api.dependencies import (
    ApplyToJobDep,
    AssignJobDep,
    AvailableJobsDep,
    CompleteJobDep,
    ListApplicationsDep,
    ListJobsDep,
    PostJobDep,
    RateTradespersonDep,
)
from marketplace.api.schemas.application import (
    ApplicationEnvelope,
    ApplicationListingResponse,
    ApplicationResponse,
    ApplicationsListResponse,
    ApplyToJobRequest,
    AssignmentResponse,
)
from marketplace.api.schemas.job import (
    AvailableJobsResponse,
    ClientAssignJobRequest,
    CompleteJobRequest,
    CompleteJobResponse,
    JobEnvelope,
    JobListingResponse,
    JobPostRequest,
    JobResponse,
    JobsListResponse,
    RateTradespersonResponse,
)
from marketplace.api.schemas.review import RateTradespersonRequest, ReviewResponse
from marketplace.application.use_cases import (
    apply_to_job,
    assign_job,
    complete_job,
    post_job,
    rate_tradesperson,
)
from marketplace.config.logging import get_logger
from marketplace.domain.value_objects.actor_type import ActorType
from marketplace.domain.value_objects.job_stage import JobStage

logger = get_logger(__name__)
router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=JobsListResponse)
async def list_jobs(
    use_case: ListJobsDep,
    client_id: Optional[UUID] = Query(None, alias="clientId"),
    stage: Optional[JobStage] = Query(None, alias="status"),
    limit: Optional[int] = Query(None, ge=1),
):
    """List jobs with client, assigned tradesperson and reviews.

    Without ``clientId`` this is the admin listing of every job.
    """
    listings = await use_case.execute(client_id=client_id, stage=stage, limit=limit)
    return JobsListResponse(
        jobs=[JobListingResponse.from_listing(listing) for listing in listings]
    )


@router.post("/post", response_model=JobEnvelope, status_code=status.HTTP_201_CREATED)
async def post_new_job(job_data: JobPostRequest, use_case: PostJobDep):
    """Post a job; it stays hidden from tradespeople until an admin approves it."""
    result = await use_case.execute(
        post_job.PostJobRequest(
            client_id=job_data.client_id,
            trade=job_data.trade,
            description=job_data.job_description,
            postcode=job_data.postcode,
            budget=job_data.budget,
            budget_type=job_data.budget_type,
            preferred_date=job_data.preferred_date,
        )
    )
    return JobEnvelope(job=JobResponse.model_validate(result.job))


@router.get("/available", response_model=AvailableJobsResponse)
async def available_jobs(
    use_case: AvailableJobsDep,
    tradesperson_id: UUID = Query(..., alias="tradespersonId"),
):
    """Approved open jobs matching the tradesperson's trade and district."""
    jobs = await use_case.execute(tradesperson_id)
    return AvailableJobsResponse(jobs=[JobResponse.model_validate(job) for job in jobs])


@router.get("/applications", response_model=ApplicationsListResponse)
async def tradesperson_applications(
    use_case: ListApplicationsDep,
    tradesperson_id: UUID = Query(..., alias="tradespersonId"),
):
    listings = await use_case.for_tradesperson(tradesperson_id)
    return ApplicationsListResponse(
        applications=[
            ApplicationListingResponse.from_listing(listing) for listing in listings
        ]
    )


@router.get("/{job_id}/applications", response_model=ApplicationsListResponse)
async def job_applications(job_id: UUID, use_case: ListApplicationsDep):
    listings = await use_case.for_job(job_id)
    return ApplicationsListResponse(
        applications=[
            ApplicationListingResponse.from_listing(listing) for listing in listings
        ]
    )


@router.post(
    "/apply", response_model=ApplicationEnvelope, status_code=status.HTTP_201_CREATED
)
async def apply(application_data: ApplyToJobRequest, use_case: ApplyToJobDep):
    """Submit a quotation for an open job."""
    application = await use_case.execute(
        apply_to_job.ApplyToJobRequest(
            job_id=application_data.job_id,
            tradesperson_id=application_data.tradesperson_id,
            quotation_amount=application_data.quotation_amount,
            quotation_notes=application_data.quotation_notes,
        )
    )
    return ApplicationEnvelope(application=ApplicationResponse.model_validate(application))


@router.post("/client-assign", response_model=AssignmentResponse)
async def client_assign(assign_data: ClientAssignJobRequest, use_case: AssignJobDep):
    """Client picks one of the applicants.

    Rejected when the job was assigned by an admin.
    """
    result = await use_case.execute(
        assign_job.AssignJobRequest(
            job_id=assign_data.job_id,
            tradesperson_id=assign_data.tradesperson_id,
            assigned_by=ActorType.CLIENT,
            quotation_amount=assign_data.quotation_amount,
            quotation_notes=assign_data.quotation_notes,
            client_id=assign_data.client_id,
        )
    )
    return assignment_response(result)


@router.post("/complete", response_model=CompleteJobResponse)
async def complete(completion_data: CompleteJobRequest, use_case: CompleteJobDep):
    """Mark an assigned job as completed, recording any ratings in the same step."""
    result = await use_case.execute(
        complete_job.CompleteJobRequest(
            job_id=completion_data.job_id,
            completed_by=completion_data.completed_by,
            reviewer_type=completion_data.reviewer_type,
            reviewer_id=completion_data.reviewer_id,
            ratings=[
                complete_job.RatingInput(
                    tradesperson_id=item.tradesperson_id,
                    rating=item.rating,
                    review=item.review,
                )
                for item in completion_data.ratings
            ],
        )
    )
    return CompleteJobResponse(
        job=JobResponse.model_validate(result.job),
        reviews=[ReviewResponse.model_validate(r) for r in result.reviews],
    )


@router.post(
    "/rate-tradesperson",
    response_model=RateTradespersonResponse,
    status_code=status.HTTP_201_CREATED,
)
async def rate(rating_data: RateTradespersonRequest, use_case: RateTradespersonDep):
    result = await use_case.execute(
        rate_tradesperson.RateTradespersonRequest(
            job_id=rating_data.job_id,
            tradesperson_id=rating_data.tradesperson_id,
            rating=rating_data.rating,
            review=rating_data.review,
            reviewer_type=rating_data.reviewer_type,
            reviewer_id=rating_data.reviewer_id,
        )
    )
    return RateTradespersonResponse(
        review=ReviewResponse.model_validate(result.review),
        job=JobResponse.model_validate(result.job),
    )


def assignment_response(result: assign_job.AssignJobResult) -> AssignmentResponse:
    return AssignmentResponse(
        job=JobResponse.model_validate(result.job),
        application=ApplicationResponse.model_validate(result.application),
        rejected_application_ids=result.rejected_application_ids,
        reassigned=result.event.is_reassignment,
    )
