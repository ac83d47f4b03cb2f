"""
Review recording shared by completion and stand-alone rating.
"""

from typing import Optional
from uuid import UUID

from marketplace.application.interfaces.repositories import JobReviewRepositoryInterface
from marketplace.application.services.transitions import check_transition
from marketplace.config.logging import get_logger
from marketplace.domain.entities.job import Job
from marketplace.domain.entities.job_review import JobReview
from marketplace.domain.exceptions.validation_error import ValidationError
from marketplace.domain.exceptions.workflow_error import ConflictError
from marketplace.domain.lifecycle import JobAction
from marketplace.domain.value_objects.actor_type import ActorType
from marketplace.infrastructure.monitoring.metrics import record_review

logger = get_logger(__name__)


class ReviewRecorder:
    """Validates and stores a review against a job that is being rated.

    The caller owns the transaction and persists ``job`` afterwards, since
    recording the first review moves the job to the reviewed stage.
    """

    def __init__(
        self,
        review_repo: JobReviewRepositoryInterface,
        enforce_unique_reviews: bool = True,
    ):
        self.review_repo = review_repo
        self.enforce_unique_reviews = enforce_unique_reviews

    async def record(
        self,
        job: Job,
        tradesperson_id: UUID,
        rating: int,
        review_text: Optional[str],
        reviewer_type: ActorType,
        reviewer_id: Optional[UUID],
    ) -> JobReview:
        try:
            reviewer_type = ActorType(reviewer_type)
        except ValueError as e:
            raise ValidationError(f"Unknown reviewer type {reviewer_type!r}") from e

        check_transition(job, JobAction.RATE, reviewer_type)

        if job.assigned_tradesperson_id != tradesperson_id:
            raise ValidationError(
                f"Tradesperson {tradesperson_id} was not assigned to job {job.id}"
            )

        if reviewer_id is None:
            if reviewer_type != ActorType.CLIENT:
                raise ValidationError("Reviewer ID is required")
            reviewer_id = job.client_id

        try:
            review = JobReview(
                job_id=job.id,
                tradesperson_id=tradesperson_id,
                reviewer_type=reviewer_type,
                reviewer_id=reviewer_id,
                rating=rating,
                review_text=review_text,
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e

        if self.enforce_unique_reviews and await self.review_repo.exists(
            job.id, tradesperson_id, reviewer_type, reviewer_id
        ):
            raise ConflictError("This tradesperson has already been rated for this job")

        created = await self.review_repo.create(review)
        job.mark_reviewed(reviewer_type)
        record_review(reviewer_type.value, rating)

        logger.info(
            "Review recorded",
            job_id=str(job.id),
            tradesperson_id=str(tradesperson_id),
            reviewer_type=reviewer_type.value,
            rating=rating,
        )
        return created
