"""Job domain entity."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from marketplace.domain.lifecycle import Allowed, Decision, JobAction, decide
from marketplace.domain.value_objects.actor_type import ActorType
from marketplace.domain.value_objects.budget_type import BudgetType
from marketplace.domain.value_objects.job_stage import JobStage
from marketplace.domain.value_objects.postcode import Postcode


@dataclass
class Job:
    """Job domain entity."""

    client_id: UUID
    trade: str
    description: str
    postcode: str
    budget: float
    budget_type: BudgetType = BudgetType.FIXED
    preferred_date: Optional[date] = None
    id: UUID = field(default_factory=uuid4)
    status: JobStage = JobStage.PENDING_APPROVAL
    is_approved: bool = False
    approved_at: Optional[datetime] = None
    assigned_tradesperson_id: Optional[UUID] = None
    assigned_by: Optional[ActorType] = None
    assigned_at: Optional[datetime] = None
    quotation_amount: Optional[float] = None
    quotation_notes: Optional[str] = None
    is_completed: bool = False
    completed_at: Optional[datetime] = None
    completed_by: Optional[ActorType] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate job data."""
        if not self.trade or not self.trade.strip():
            raise ValueError("Trade is required")
        if not self.description or not self.description.strip():
            raise ValueError("Job description is required")
        if self.budget is None or self.budget < 0:
            raise ValueError("Budget must be a non-negative amount")

        self.postcode = Postcode(self.postcode).value
        self.status = JobStage(self.status)
        self.budget_type = BudgetType(self.budget_type)
        if self.assigned_by is not None:
            self.assigned_by = ActorType(self.assigned_by)
        if self.completed_by is not None:
            self.completed_by = ActorType(self.completed_by)

        if self.is_completed and not self.assigned_tradesperson_id:
            raise ValueError("A completed job must have an assigned tradesperson")

        # Set timestamps if not provided
        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = datetime.now(timezone.utc)

    @property
    def stage(self) -> JobStage:
        return self.status

    @property
    def is_assigned(self) -> bool:
        return self.assigned_tradesperson_id is not None

    def decide(self, action: JobAction, actor: ActorType) -> Decision:
        """Look up whether ``actor`` may perform ``action`` right now."""
        return decide(self, action, actor)

    def require(self, action: JobAction, actor: ActorType) -> Allowed:
        """Like :meth:`decide`, but raise the rejection as a domain error."""
        decision = self.decide(action, actor)
        if not isinstance(decision, Allowed):
            raise decision.to_exception()
        return decision

    def approve(self) -> bool:
        """Open the job for applications. Returns False if already approved."""
        decision = self.require(JobAction.APPROVE, ActorType.ADMIN)
        if self.is_approved:
            return False

        now = datetime.now(timezone.utc)
        self.is_approved = True
        self.approved_at = now
        self.status = decision.to_stage
        self.updated_at = now
        return True

    def assign(
        self,
        tradesperson_id: UUID,
        quotation_amount: float,
        quotation_notes: Optional[str],
        assigned_by: ActorType,
    ) -> Optional[UUID]:
        """Bind a tradesperson to the job.

        Returns the previously assigned tradesperson, if any.
        """
        decision = self.require(JobAction.ASSIGN, assigned_by)
        if quotation_amount is None or quotation_amount <= 0:
            raise ValueError("Quotation amount must be a positive number")

        previous = self.assigned_tradesperson_id
        now = datetime.now(timezone.utc)
        self.assigned_tradesperson_id = tradesperson_id
        self.quotation_amount = quotation_amount
        self.quotation_notes = quotation_notes
        self.assigned_by = ActorType(assigned_by)
        self.assigned_at = now
        self.status = decision.to_stage
        self.updated_at = now
        return previous

    def complete(self, completed_by: ActorType) -> None:
        """Mark job as completed."""
        decision = self.require(JobAction.COMPLETE, completed_by)

        now = datetime.now(timezone.utc)
        self.is_completed = True
        self.completed_at = now
        self.completed_by = ActorType(completed_by)
        self.status = decision.to_stage
        self.updated_at = now

    def mark_reviewed(self, reviewer_type: ActorType) -> None:
        """Record that a review has been attached."""
        decision = self.require(JobAction.RATE, reviewer_type)
        if decision.changes_stage:
            self.status = decision.to_stage
            self.updated_at = datetime.now(timezone.utc)
