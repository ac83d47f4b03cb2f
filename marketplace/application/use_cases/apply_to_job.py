"""Apply to job use case."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from marketplace.application.interfaces.repositories import (
    JobApplicationRepositoryInterface,
    JobRepositoryInterface,
    TradespersonRepositoryInterface,
)
from marketplace.application.services.transitions import check_transition
from marketplace.config.logging import get_logger
from marketplace.domain.entities.job_application import JobApplication
from marketplace.domain.exceptions.not_found_error import NotFoundError
from marketplace.domain.exceptions.validation_error import ValidationError
from marketplace.domain.exceptions.workflow_error import (
    AuthorizationError,
    ConflictError,
)
from marketplace.domain.lifecycle import JobAction
from marketplace.domain.value_objects.actor_type import ActorType
from marketplace.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from marketplace.infrastructure.monitoring.metrics import record_application

logger = get_logger(__name__)


@dataclass
class ApplyToJobRequest:
    """Request for applying to a job."""

    job_id: UUID
    tradesperson_id: UUID
    quotation_amount: float
    quotation_notes: Optional[str] = None


class ApplyToJobUseCase:
    """Use case for a tradesperson quoting on an open job."""

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        application_repo: JobApplicationRepositoryInterface,
        tradesperson_repo: TradespersonRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.job_repo = job_repo
        self.application_repo = application_repo
        self.tradesperson_repo = tradesperson_repo
        self.transaction_service = transaction_service

    async def execute(self, request: ApplyToJobRequest) -> JobApplication:
        logger.info(
            "Tradesperson applying to job",
            job_id=str(request.job_id),
            tradesperson_id=str(request.tradesperson_id),
            quotation_amount=request.quotation_amount,
        )

        if request.quotation_amount is None or request.quotation_amount <= 0:
            raise ValidationError("Quotation amount must be a positive number")

        async def apply() -> JobApplication:
            job = await self.job_repo.get_by_id(request.job_id, for_update=True)
            if not job:
                raise NotFoundError("Job", request.job_id)

            tradesperson = await self.tradesperson_repo.get_by_id(request.tradesperson_id)
            if not tradesperson:
                raise NotFoundError("Tradesperson", request.tradesperson_id)
            if not tradesperson.can_apply():
                raise AuthorizationError(
                    "Tradesperson account must be approved before applying to jobs",
                    actor=ActorType.TRADESPERSON.value,
                )

            check_transition(job, JobAction.APPLY, ActorType.TRADESPERSON)

            existing = await self.application_repo.get_by_job_and_tradesperson(
                job.id, tradesperson.id
            )
            if existing:
                raise ConflictError("You have already applied to this job")

            application = JobApplication(
                job_id=job.id,
                tradesperson_id=tradesperson.id,
                quotation_amount=request.quotation_amount,
                quotation_notes=request.quotation_notes,
            )
            created = await self.application_repo.create(application)
            record_application(job.trade)
            return created

        application = await self.transaction_service.execute_in_transaction(apply)

        logger.info(
            "Application submitted",
            application_id=str(application.id),
            job_id=str(application.job_id),
            tradesperson_id=str(application.tradesperson_id),
        )
        return application
