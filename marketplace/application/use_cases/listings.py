"""Read-side use cases for job and application listings."""

from typing import List, Optional
from uuid import UUID

from marketplace.application.interfaces.repositories import (
    ApplicationListing,
    JobApplicationRepositoryInterface,
    JobListing,
    JobRepositoryInterface,
    TradespersonRepositoryInterface,
)
from marketplace.config.logging import get_logger
from marketplace.domain.entities.job import Job
from marketplace.domain.exceptions.not_found_error import NotFoundError
from marketplace.domain.value_objects.job_stage import JobStage

logger = get_logger(__name__)


class ListJobsUseCase:
    """Admin listing of every job, or a client's own jobs."""

    def __init__(self, job_repo: JobRepositoryInterface, max_results: int = 500):
        self.job_repo = job_repo
        self.max_results = max_results

    async def execute(
        self,
        client_id: Optional[UUID] = None,
        stage: Optional[JobStage] = None,
        limit: Optional[int] = None,
    ) -> List[JobListing]:
        limit = min(limit or self.max_results, self.max_results)
        listings = await self.job_repo.list_jobs(
            client_id=client_id, stage=stage, limit=limit
        )

        logger.debug(
            "Jobs listed",
            client_id=str(client_id) if client_id else None,
            stage=stage.value if stage else None,
            count=len(listings),
        )
        return listings


class AvailableJobsUseCase:
    """Approved open jobs a tradesperson can still apply to.

    Jobs must match the tradesperson's trade and, when ``match_postcode`` is
    on, the postcode district (outward code). Jobs the tradesperson already
    applied to are left out.
    """

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        tradesperson_repo: TradespersonRepositoryInterface,
        match_postcode: bool = True,
        max_results: int = 500,
    ):
        self.job_repo = job_repo
        self.tradesperson_repo = tradesperson_repo
        self.match_postcode = match_postcode
        self.max_results = max_results

    async def execute(self, tradesperson_id: UUID) -> List[Job]:
        tradesperson = await self.tradesperson_repo.get_by_id(tradesperson_id)
        if not tradesperson:
            raise NotFoundError("Tradesperson", tradesperson_id)

        district = tradesperson.district if self.match_postcode else None

        jobs = await self.job_repo.find_open_by_trade(
            tradesperson.trade,
            exclude_applied_by=tradesperson.id,
            district=district,
            limit=self.max_results,
        )

        logger.debug(
            "Available jobs listed",
            tradesperson_id=str(tradesperson_id),
            trade=tradesperson.trade,
            count=len(jobs),
        )
        return jobs


class ListApplicationsUseCase:
    """Applications by job, by tradesperson, or all of them for admins."""

    def __init__(
        self,
        application_repo: JobApplicationRepositoryInterface,
        job_repo: JobRepositoryInterface,
        tradesperson_repo: TradespersonRepositoryInterface,
        max_results: int = 500,
    ):
        self.application_repo = application_repo
        self.job_repo = job_repo
        self.tradesperson_repo = tradesperson_repo
        self.max_results = max_results

    async def for_job(self, job_id: UUID) -> List[ApplicationListing]:
        if not await self.job_repo.get_by_id(job_id):
            raise NotFoundError("Job", job_id)
        return await self.application_repo.list_for_job(job_id)

    async def for_tradesperson(self, tradesperson_id: UUID) -> List[ApplicationListing]:
        if not await self.tradesperson_repo.get_by_id(tradesperson_id):
            raise NotFoundError("Tradesperson", tradesperson_id)
        return await self.application_repo.list_for_tradesperson(tradesperson_id)

    async def all(self) -> List[ApplicationListing]:
        return await self.application_repo.list_all(limit=self.max_results)
