"""Approve quotation use case."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from marketplace.application.interfaces.repositories import (
    JobApplicationRepositoryInterface,
    JobRepositoryInterface,
)
from marketplace.application.services.transitions import check_transition
from marketplace.application.use_cases.assign_job import (
    AssignJobRequest,
    AssignJobResult,
    AssignJobUseCase,
)
from marketplace.config.logging import get_logger
from marketplace.domain.entities.job import Job
from marketplace.domain.entities.job_application import JobApplication
from marketplace.domain.exceptions.not_found_error import NotFoundError
from marketplace.domain.lifecycle import JobAction
from marketplace.domain.value_objects.actor_type import ActorType
from marketplace.domain.value_objects.approval_action import ApprovalAction
from marketplace.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


@dataclass
class ApproveQuotationRequest:
    """Request for deciding on an application's quotation."""

    application_id: UUID
    action: ApprovalAction
    approved_by: ActorType = ActorType.ADMIN


@dataclass
class ApproveQuotationResult:
    """Result of a quotation decision."""

    action: ApprovalAction
    application: JobApplication
    job: Job
    assignment: Optional[AssignJobResult] = None


class ApproveQuotationUseCase:
    """Approve or reject a quotation.

    Approval is an assignment of the applicant, so it goes through
    :class:`AssignJobUseCase` with the same rules and side effects.
    """

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        application_repo: JobApplicationRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.job_repo = job_repo
        self.application_repo = application_repo
        self.transaction_service = transaction_service
        self.assign_job = AssignJobUseCase(job_repo, application_repo, transaction_service)

    async def execute(self, request: ApproveQuotationRequest) -> ApproveQuotationResult:
        action = ApprovalAction(request.action)
        actor = ActorType(request.approved_by)

        logger.info(
            "Deciding on quotation",
            application_id=str(request.application_id),
            action=action.value,
            approved_by=actor.value,
        )

        application = await self.application_repo.get_by_id(request.application_id)
        if not application:
            raise NotFoundError("Application", request.application_id)

        if action == ApprovalAction.APPROVE:
            assignment = await self.assign_job.execute(
                AssignJobRequest(
                    job_id=application.job_id,
                    tradesperson_id=application.tradesperson_id,
                    assigned_by=actor,
                    quotation_amount=application.quotation_amount,
                    quotation_notes=application.quotation_notes,
                )
            )
            return ApproveQuotationResult(
                action=action,
                application=assignment.application,
                job=assignment.job,
                assignment=assignment,
            )

        return await self.transaction_service.execute_in_transaction(
            lambda: self._reject(application, actor)
        )

    async def _reject(
        self, application: JobApplication, actor: ActorType
    ) -> ApproveQuotationResult:
        job = await self.job_repo.get_by_id(application.job_id, for_update=True)
        if not job:
            raise NotFoundError("Job", application.job_id)

        check_transition(job, JobAction.REJECT_APPLICATION, actor)
        application.reject()
        rejected = await self.application_repo.update(application)

        logger.info(
            "Quotation rejected",
            application_id=str(rejected.id),
            job_id=str(job.id),
            rejected_by=actor.value,
        )
        return ApproveQuotationResult(
            action=ApprovalAction.REJECT, application=rejected, job=job
        )
