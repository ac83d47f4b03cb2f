"""Complete job use case."""

from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from marketplace.application.interfaces.repositories import JobRepositoryInterface
from marketplace.application.services.review_recorder import ReviewRecorder
from marketplace.application.services.transitions import check_transition
from marketplace.config.logging import get_logger
from marketplace.domain.entities.job import Job
from marketplace.domain.entities.job_review import JobReview
from marketplace.domain.events.job_completed import JobCompleted
from marketplace.domain.exceptions.not_found_error import NotFoundError
from marketplace.domain.exceptions.validation_error import ValidationError
from marketplace.domain.lifecycle import JobAction
from marketplace.domain.value_objects.actor_type import ActorType
from marketplace.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


@dataclass
class RatingInput:
    """A rating submitted together with the completion."""

    tradesperson_id: UUID
    rating: int
    review: Optional[str] = None


@dataclass
class CompleteJobRequest:
    """Request for completing a job."""

    job_id: UUID
    completed_by: ActorType
    reviewer_type: Optional[ActorType] = None
    reviewer_id: Optional[UUID] = None
    ratings: List[RatingInput] = field(default_factory=list)


@dataclass
class CompleteJobResult:
    """Result of completing a job."""

    job: Job
    reviews: List[JobReview]
    event: JobCompleted


class CompleteJobUseCase:
    """Use case for closing out an assigned job, optionally rating it at once."""

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        review_recorder: ReviewRecorder,
        transaction_service: TransactionService,
    ):
        self.job_repo = job_repo
        self.review_recorder = review_recorder
        self.transaction_service = transaction_service

    async def execute(self, request: CompleteJobRequest) -> CompleteJobResult:
        actor = ActorType(request.completed_by)

        logger.info(
            "Completing job",
            job_id=str(request.job_id),
            completed_by=actor.value,
            ratings=len(request.ratings),
        )

        if request.ratings and request.reviewer_type is None:
            raise ValidationError("Reviewer type is required when submitting ratings")

        async def complete() -> CompleteJobResult:
            job = await self.job_repo.get_by_id(request.job_id, for_update=True)
            if not job:
                raise NotFoundError("Job", request.job_id)

            check_transition(job, JobAction.COMPLETE, actor)
            job.complete(actor)

            reviews = []
            for rating in request.ratings:
                review = await self.review_recorder.record(
                    job,
                    tradesperson_id=rating.tradesperson_id,
                    rating=rating.rating,
                    review_text=rating.review,
                    reviewer_type=request.reviewer_type,
                    reviewer_id=request.reviewer_id,
                )
                reviews.append(review)

            updated = await self.job_repo.update(job)
            event = JobCompleted(
                job_id=updated.id,
                tradesperson_id=updated.assigned_tradesperson_id,
                completed_by=actor.value,
                completed_at=updated.completed_at,
                reviews_recorded=len(reviews),
            )
            return CompleteJobResult(job=updated, reviews=reviews, event=event)

        result = await self.transaction_service.execute_in_transaction(complete)

        logger.info(
            "Job completed",
            job_id=str(result.job.id),
            tradesperson_id=str(result.event.tradesperson_id),
            status=result.job.status.value,
            reviews_recorded=result.event.reviews_recorded,
        )
        return result
