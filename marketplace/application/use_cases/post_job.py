"""Post job use case."""

from dataclasses import dataclass
from datetime import date
from typing import Optional
from uuid import UUID

from marketplace.application.interfaces.repositories import (
    ClientRepositoryInterface,
    JobRepositoryInterface,
)
from marketplace.config.logging import get_logger
from marketplace.domain.entities.job import Job
from marketplace.domain.exceptions.not_found_error import NotFoundError
from marketplace.domain.exceptions.validation_error import ValidationError
from marketplace.domain.value_objects.budget_type import BudgetType
from marketplace.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from marketplace.infrastructure.monitoring.metrics import record_job_posted

logger = get_logger(__name__)


@dataclass
class PostJobRequest:
    """Request for posting a job."""

    client_id: UUID
    trade: str
    description: str
    postcode: str
    budget: float
    budget_type: BudgetType = BudgetType.FIXED
    preferred_date: Optional[date] = None


@dataclass
class PostJobResult:
    """Result of posting a job."""

    job: Job


class PostJobUseCase:
    """Use case for a client posting a job that waits for admin approval."""

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        client_repo: ClientRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.job_repo = job_repo
        self.client_repo = client_repo
        self.transaction_service = transaction_service

    async def execute(self, request: PostJobRequest) -> PostJobResult:
        logger.info(
            "Posting job",
            client_id=str(request.client_id),
            trade=request.trade,
            postcode=request.postcode,
        )

        client = await self.client_repo.get_by_id(request.client_id)
        if not client:
            raise NotFoundError("Client", request.client_id)

        try:
            job = Job(
                client_id=client.id,
                trade=request.trade,
                description=request.description,
                postcode=request.postcode,
                budget=request.budget,
                budget_type=request.budget_type,
                preferred_date=request.preferred_date,
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e

        created_job = await self.transaction_service.execute_in_transaction(
            lambda: self.job_repo.create(job)
        )
        record_job_posted(created_job.trade)

        logger.info(
            "Job posted and awaiting approval",
            job_id=str(created_job.id),
            client_id=str(client.id),
        )
        return PostJobResult(job=created_job)
