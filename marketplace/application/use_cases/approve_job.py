"""Approve job use case."""

from dataclasses import dataclass
from uuid import UUID

from marketplace.application.interfaces.repositories import JobRepositoryInterface
from marketplace.application.services.transitions import check_transition
from marketplace.config.logging import get_logger
from marketplace.domain.entities.job import Job
from marketplace.domain.exceptions.not_found_error import NotFoundError
from marketplace.domain.lifecycle import JobAction
from marketplace.domain.value_objects.actor_type import ActorType
from marketplace.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


@dataclass
class ApproveJobResult:
    """Result of approving a job."""

    job: Job
    changed: bool


class ApproveJobUseCase:
    """Admin approval gate that opens a job for applications.

    Approving an already approved job is a no-op that returns the job.
    """

    def __init__(
        self, job_repo: JobRepositoryInterface, transaction_service: TransactionService
    ):
        self.job_repo = job_repo
        self.transaction_service = transaction_service

    async def execute(self, job_id: UUID) -> ApproveJobResult:
        async def approve() -> ApproveJobResult:
            job = await self.job_repo.get_by_id(job_id, for_update=True)
            if not job:
                raise NotFoundError("Job", job_id)

            check_transition(job, JobAction.APPROVE, ActorType.ADMIN)
            if not job.approve():
                logger.info("Job already approved", job_id=str(job_id))
                return ApproveJobResult(job=job, changed=False)

            updated = await self.job_repo.update(job)
            return ApproveJobResult(job=updated, changed=True)

        result = await self.transaction_service.execute_in_transaction(approve)

        logger.info(
            "Job approved",
            job_id=str(job_id),
            status=result.job.status.value,
            changed=result.changed,
        )
        return result
