"""Assign job use case.

The single place where a tradesperson gets bound to a job, whether the client
picks an applicant, an admin assigns one, or an admin approves a quotation.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from marketplace.application.interfaces.repositories import (
    JobApplicationRepositoryInterface,
    JobRepositoryInterface,
)
from marketplace.application.services.transitions import check_transition
from marketplace.config.logging import get_logger
from marketplace.domain.entities.job import Job
from marketplace.domain.entities.job_application import JobApplication
from marketplace.domain.events.job_assigned import JobAssigned
from marketplace.domain.exceptions.not_found_error import NotFoundError
from marketplace.domain.exceptions.validation_error import ValidationError
from marketplace.domain.exceptions.workflow_error import AuthorizationError
from marketplace.domain.lifecycle import JobAction
from marketplace.domain.value_objects.actor_type import ActorType
from marketplace.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


@dataclass
class AssignJobRequest:
    """Request for assigning a job to a tradesperson."""

    job_id: UUID
    tradesperson_id: UUID
    assigned_by: ActorType
    quotation_amount: Optional[float] = None
    quotation_notes: Optional[str] = None
    client_id: Optional[UUID] = None


@dataclass
class AssignJobResult:
    """Everything the assignment touched."""

    job: Job
    application: JobApplication
    event: JobAssigned
    rejected_application_ids: List[UUID] = field(default_factory=list)


class AssignJobUseCase:
    """Use case for binding a tradesperson to a job."""

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        application_repo: JobApplicationRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.job_repo = job_repo
        self.application_repo = application_repo
        self.transaction_service = transaction_service

    async def execute(self, request: AssignJobRequest) -> AssignJobResult:
        """Assign the job, accept the chosen application and reject the rest.

        All writes happen in one transaction; any failure leaves the job and
        its applications untouched.
        """
        actor = ActorType(request.assigned_by)

        logger.info(
            "Assigning job",
            job_id=str(request.job_id),
            tradesperson_id=str(request.tradesperson_id),
            assigned_by=actor.value,
        )

        async def assign() -> AssignJobResult:
            job = await self.job_repo.get_by_id(request.job_id, for_update=True)
            if not job:
                raise NotFoundError("Job", request.job_id)

            if (
                actor == ActorType.CLIENT
                and request.client_id is not None
                and request.client_id != job.client_id
            ):
                raise AuthorizationError(
                    "Only the client who posted the job can assign it",
                    actor=actor.value,
                )

            check_transition(job, JobAction.ASSIGN, actor)

            application = await self.application_repo.get_by_job_and_tradesperson(
                job.id, request.tradesperson_id
            )
            if not application:
                raise NotFoundError(
                    "Application by tradesperson", request.tradesperson_id
                )

            quotation_amount = request.quotation_amount
            if quotation_amount is None:
                quotation_amount = application.quotation_amount
            quotation_notes = request.quotation_notes
            if quotation_notes is None:
                quotation_notes = application.quotation_notes

            application.accept()
            try:
                previous = job.assign(
                    tradesperson_id=application.tradesperson_id,
                    quotation_amount=quotation_amount,
                    quotation_notes=quotation_notes,
                    assigned_by=actor,
                )
            except ValueError as e:
                raise ValidationError(str(e)) from e

            # Siblings first so the job never holds two accepted applications
            rejected_ids = await self.application_repo.reject_others(
                job.id, keep_application_id=application.id
            )
            accepted = await self.application_repo.update(application)
            updated_job = await self.job_repo.update(job)

            event = JobAssigned(
                job_id=updated_job.id,
                tradesperson_id=accepted.tradesperson_id,
                application_id=accepted.id,
                assigned_by=actor.value,
                quotation_amount=updated_job.quotation_amount,
                assigned_at=updated_job.assigned_at,
                previous_tradesperson_id=previous,
                rejected_application_ids=rejected_ids,
            )
            return AssignJobResult(
                job=updated_job,
                application=accepted,
                event=event,
                rejected_application_ids=rejected_ids,
            )

        result = await self.transaction_service.execute_in_transaction(assign)

        logger.info(
            "Job assigned",
            job_id=str(result.job.id),
            tradesperson_id=str(result.event.tradesperson_id),
            assigned_by=actor.value,
            quotation_amount=result.job.quotation_amount,
            reassignment=result.event.is_reassignment,
            rejected_applications=len(result.rejected_application_ids),
        )
        return result
