"""Job repository implementation."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import exists, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from marketplace.application.interfaces.repositories import (
    JobListing,
    JobRepositoryInterface,
)
from marketplace.config.logging import get_logger
from marketplace.domain.entities.job import Job
from marketplace.domain.exceptions.not_found_error import NotFoundError
from marketplace.domain.value_objects.job_stage import JobStage
from marketplace.infrastructure.database.models.job import JobModel
from marketplace.infrastructure.database.models.job_application import (
    JobApplicationModel,
)

from .mappers import (
    apply_job_to_model,
    client_from_model,
    job_from_model,
    review_from_model,
    tradesperson_from_model,
)

logger = get_logger(__name__)


class JobRepository(JobRepositoryInterface):
    """Job repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, job_id: UUID, for_update: bool = False) -> Optional[Job]:
        """Get job by ID."""
        stmt = select(JobModel).where(JobModel.id == job_id)
        if for_update:
            # Serialise concurrent workflows touching the same job
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return job_from_model(model) if model else None

    async def create(self, job: Job) -> Job:
        """Create a new job."""
        job_model = apply_job_to_model(
            job,
            JobModel(id=job.id, client_id=job.client_id, created_at=job.created_at),
        )

        self.db.add(job_model)
        # Use flush instead of commit to maintain transaction atomicity
        await self.db.flush()
        await self.db.refresh(job_model)

        logger.debug("Job stored", job_id=str(job.id), trade=job.trade)
        return job_from_model(job_model)

    async def update(self, job: Job) -> Job:
        """Update an existing job."""
        stmt = select(JobModel).where(JobModel.id == job.id)
        result = await self.db.execute(stmt)
        job_model = result.scalar_one_or_none()

        if not job_model:
            raise NotFoundError("Job", job.id)

        apply_job_to_model(job, job_model)

        await self.db.flush()
        await self.db.refresh(job_model)

        return job_from_model(job_model)

    async def list_jobs(
        self,
        client_id: Optional[UUID] = None,
        stage: Optional[JobStage] = None,
        limit: int = 100,
    ) -> List[JobListing]:
        """List jobs newest first with client, tradesperson and reviews."""
        stmt = (
            select(JobModel)
            .options(
                selectinload(JobModel.client),
                selectinload(JobModel.assigned_tradesperson),
                selectinload(JobModel.reviews),
            )
            .order_by(JobModel.created_at.desc())
            .limit(limit)
        )
        if client_id is not None:
            stmt = stmt.where(JobModel.client_id == client_id)
        if stage is not None:
            stmt = stmt.where(
                JobModel.status.in_([s.value for s in JobStage(stage).listed_stages()])
            )

        result = await self.db.execute(stmt)
        models = result.scalars().all()

        return [
            JobListing(
                job=job_from_model(model),
                client=client_from_model(model.client) if model.client else None,
                tradesperson=(
                    tradesperson_from_model(model.assigned_tradesperson)
                    if model.assigned_tradesperson
                    else None
                ),
                reviews=[review_from_model(review) for review in model.reviews],
            )
            for model in models
        ]

    async def find_open_by_trade(
        self,
        trade: str,
        exclude_applied_by: Optional[UUID] = None,
        district: Optional[str] = None,
        limit: int = 100,
    ) -> List[Job]:
        """Find approved open jobs for a trade, optionally in one postal district."""
        stmt = (
            select(JobModel)
            .where(
                JobModel.status == JobStage.OPEN.value,
                JobModel.is_approved.is_(True),
                func.lower(JobModel.trade) == trade.strip().lower(),
            )
            .order_by(JobModel.created_at.desc())
            .limit(limit)
        )
        if district is not None:
            # Stored postcodes are normalised, so the district is the text before the space
            stmt = stmt.where(
                or_(
                    JobModel.postcode == district,
                    JobModel.postcode.startswith(f"{district} ", autoescape=True),
                )
            )
        if exclude_applied_by is not None:
            already_applied = exists().where(
                JobApplicationModel.job_id == JobModel.id,
                JobApplicationModel.tradesperson_id == exclude_applied_by,
            )
            stmt = stmt.where(~already_applied)

        result = await self.db.execute(stmt)
        return [job_from_model(model) for model in result.scalars().all()]
