"""Rate tradesperson use case."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from marketplace.application.interfaces.repositories import JobRepositoryInterface
from marketplace.application.services.review_recorder import ReviewRecorder
from marketplace.config.logging import get_logger
from marketplace.domain.entities.job import Job
from marketplace.domain.entities.job_review import JobReview
from marketplace.domain.exceptions.not_found_error import NotFoundError
from marketplace.domain.value_objects.actor_type import ActorType
from marketplace.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


@dataclass
class RateTradespersonRequest:
    """Request for rating a tradesperson on a completed job."""

    job_id: UUID
    tradesperson_id: UUID
    rating: int
    reviewer_type: ActorType
    review: Optional[str] = None
    reviewer_id: Optional[UUID] = None


@dataclass
class RateTradespersonResult:
    review: JobReview
    job: Job


class RateTradespersonUseCase:
    """Use case for leaving a review once a job is completed."""

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        review_recorder: ReviewRecorder,
        transaction_service: TransactionService,
    ):
        self.job_repo = job_repo
        self.review_recorder = review_recorder
        self.transaction_service = transaction_service

    async def execute(self, request: RateTradespersonRequest) -> RateTradespersonResult:
        async def rate() -> RateTradespersonResult:
            job = await self.job_repo.get_by_id(request.job_id, for_update=True)
            if not job:
                raise NotFoundError("Job", request.job_id)

            review = await self.review_recorder.record(
                job,
                tradesperson_id=request.tradesperson_id,
                rating=request.rating,
                review_text=request.review,
                reviewer_type=request.reviewer_type,
                reviewer_id=request.reviewer_id,
            )
            updated = await self.job_repo.update(job)
            return RateTradespersonResult(review=review, job=updated)

        result = await self.transaction_service.execute_in_transaction(rate)

        logger.info(
            "Tradesperson rated",
            job_id=str(request.job_id),
            tradesperson_id=str(request.tradesperson_id),
            rating=request.rating,
        )
        return result
