"""Job review repository implementation."""

from typing import List
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.application.interfaces.repositories import JobReviewRepositoryInterface
from marketplace.domain.entities.job_review import JobReview
from marketplace.domain.value_objects.actor_type import ActorType
from marketplace.infrastructure.database.models.job_review import JobReviewModel

from .mappers import review_from_model


class JobReviewRepository(JobReviewRepositoryInterface):
    """Job review repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, review: JobReview) -> JobReview:
        """Create a new review."""
        model = JobReviewModel(
            id=review.id,
            job_id=review.job_id,
            tradesperson_id=review.tradesperson_id,
            reviewer_type=review.reviewer_type.value,
            reviewer_id=review.reviewer_id,
            rating=review.rating,
            review_text=review.review_text,
            reviewed_at=review.reviewed_at,
        )

        self.db.add(model)
        await self.db.flush()
        await self.db.refresh(model)

        return review_from_model(model)

    async def exists(
        self,
        job_id: UUID,
        tradesperson_id: UUID,
        reviewer_type: ActorType,
        reviewer_id: UUID,
    ) -> bool:
        """Check if the reviewer already reviewed the tradesperson on the job."""
        stmt = select(func.count(JobReviewModel.id)).where(
            JobReviewModel.job_id == job_id,
            JobReviewModel.tradesperson_id == tradesperson_id,
            JobReviewModel.reviewer_type == ActorType(reviewer_type).value,
            JobReviewModel.reviewer_id == reviewer_id,
        )
        result = await self.db.execute(stmt)
        return result.scalar_one() > 0

    async def list_for_job(self, job_id: UUID) -> List[JobReview]:
        """List reviews attached to a job."""
        stmt = (
            select(JobReviewModel)
            .where(JobReviewModel.job_id == job_id)
            .order_by(JobReviewModel.reviewed_at)
        )
        result = await self.db.execute(stmt)
        return [review_from_model(model) for model in result.scalars().all()]
