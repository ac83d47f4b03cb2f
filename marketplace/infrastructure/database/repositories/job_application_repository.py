"""Job application repository implementation."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from marketplace.application.interfaces.repositories import (
    ApplicationListing,
    JobApplicationRepositoryInterface,
)
from marketplace.config.logging import get_logger
from marketplace.domain.entities.job_application import JobApplication
from marketplace.domain.exceptions.not_found_error import NotFoundError
from marketplace.domain.exceptions.workflow_error import ConflictError
from marketplace.domain.value_objects.application_status import ApplicationStatus
from marketplace.infrastructure.database.models.base import utcnow
from marketplace.infrastructure.database.models.job_application import (
    JobApplicationModel,
)

from .mappers import application_from_model, job_from_model, tradesperson_from_model

logger = get_logger(__name__)


class JobApplicationRepository(JobApplicationRepositoryInterface):
    """Job application repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, application_id: UUID) -> Optional[JobApplication]:
        """Get application by ID."""
        stmt = select(JobApplicationModel).where(JobApplicationModel.id == application_id)
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return application_from_model(model) if model else None

    async def get_by_job_and_tradesperson(
        self, job_id: UUID, tradesperson_id: UUID
    ) -> Optional[JobApplication]:
        """Get the application a tradesperson made on a job."""
        stmt = select(JobApplicationModel).where(
            JobApplicationModel.job_id == job_id,
            JobApplicationModel.tradesperson_id == tradesperson_id,
        )
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return application_from_model(model) if model else None

    async def create(self, application: JobApplication) -> JobApplication:
        """Create a new application."""
        model = JobApplicationModel(
            id=application.id,
            job_id=application.job_id,
            tradesperson_id=application.tradesperson_id,
            quotation_amount=application.quotation_amount,
            quotation_notes=application.quotation_notes,
            status=application.status.value,
            applied_at=application.applied_at,
            updated_at=application.updated_at,
        )

        self.db.add(model)
        try:
            await self.db.flush()
        except IntegrityError as e:
            logger.warning(
                "Duplicate application rejected by database",
                job_id=str(application.job_id),
                tradesperson_id=str(application.tradesperson_id),
                error=str(e.orig),
            )
            raise ConflictError("You have already applied to this job") from e

        await self.db.refresh(model)
        return application_from_model(model)

    async def update(self, application: JobApplication) -> JobApplication:
        """Persist status changes of an application."""
        stmt = select(JobApplicationModel).where(JobApplicationModel.id == application.id)
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise NotFoundError("Application", application.id)

        model.status = application.status.value
        model.quotation_amount = application.quotation_amount
        model.quotation_notes = application.quotation_notes
        model.updated_at = application.updated_at

        await self.db.flush()
        await self.db.refresh(model)

        return application_from_model(model)

    async def reject_others(self, job_id: UUID, keep_application_id: UUID) -> List[UUID]:
        """Reject every pending or accepted application of a job except one."""
        stmt = select(JobApplicationModel).where(
            JobApplicationModel.job_id == job_id,
            JobApplicationModel.id != keep_application_id,
            JobApplicationModel.status.in_(
                [ApplicationStatus.PENDING.value, ApplicationStatus.ACCEPTED.value]
            ),
        )
        result = await self.db.execute(stmt)
        models = result.scalars().all()

        now = utcnow()
        for model in models:
            model.status = ApplicationStatus.REJECTED.value
            model.updated_at = now

        # Flushed on its own so the previous acceptance is gone before a new one lands
        await self.db.flush()

        return [model.id for model in models]

    async def list_for_job(self, job_id: UUID) -> List[ApplicationListing]:
        """List applications made on a job."""
        stmt = (
            self._listing_query()
            .where(JobApplicationModel.job_id == job_id)
            .order_by(JobApplicationModel.applied_at.desc())
        )
        return await self._fetch_listings(stmt)

    async def list_for_tradesperson(self, tradesperson_id: UUID) -> List[ApplicationListing]:
        """List applications made by a tradesperson."""
        stmt = (
            self._listing_query()
            .where(JobApplicationModel.tradesperson_id == tradesperson_id)
            .order_by(JobApplicationModel.applied_at.desc())
        )
        return await self._fetch_listings(stmt)

    async def list_all(self, limit: int = 100) -> List[ApplicationListing]:
        """List all applications newest first."""
        stmt = (
            self._listing_query()
            .order_by(JobApplicationModel.applied_at.desc())
            .limit(limit)
        )
        return await self._fetch_listings(stmt)

    def _listing_query(self):
        return select(JobApplicationModel).options(
            selectinload(JobApplicationModel.job),
            selectinload(JobApplicationModel.tradesperson),
        )

    async def _fetch_listings(self, stmt) -> List[ApplicationListing]:
        result = await self.db.execute(stmt)
        return [
            ApplicationListing(
                application=application_from_model(model),
                job=job_from_model(model.job) if model.job else None,
                tradesperson=(
                    tradesperson_from_model(model.tradesperson)
                    if model.tradesperson
                    else None
                ),
            )
            for model in result.scalars().all()
        ]
