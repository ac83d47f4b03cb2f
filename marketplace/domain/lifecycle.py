"""
Job lifecycle transition table.

Every change to a job's stage goes through :func:`decide`, which looks up the
``(stage, action)`` pair in :data:`TRANSITIONS` and answers with either an
:class:`Allowed` or a :class:`Rejected` decision. Both the client and the admin
assignment paths, quotation approval, completion and rating consult the same
table.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, FrozenSet, Optional, Tuple, Union

from marketplace.domain.exceptions.workflow_error import (
    AuthorizationError,
    InvalidTransitionError,
    WorkflowError,
)
from marketplace.domain.value_objects.actor_type import ActorType
from marketplace.domain.value_objects.job_stage import JobStage

if TYPE_CHECKING:
    from marketplace.domain.entities.job import Job


class JobAction(str, Enum):
    """Actions that can be requested against a job."""

    APPROVE = "approve"
    APPLY = "apply"
    ASSIGN = "assign"
    REJECT_APPLICATION = "reject_application"
    COMPLETE = "complete"
    RATE = "rate"


@dataclass(frozen=True)
class Allowed:
    """The action may proceed; the job moves to ``to_stage``."""

    action: JobAction
    from_stage: JobStage
    to_stage: JobStage

    @property
    def changes_stage(self) -> bool:
        return self.from_stage != self.to_stage


@dataclass(frozen=True)
class Rejected:
    """The action is refused and nothing may be mutated."""

    action: JobAction
    stage: JobStage
    reason: str
    not_permitted: bool = False

    def to_exception(self) -> WorkflowError:
        if self.not_permitted:
            return AuthorizationError(self.reason)
        return InvalidTransitionError(self.reason, current_state=self.stage.value)


Decision = Union[Allowed, Rejected]

Guard = Callable[["Job", ActorType], Optional[str]]


@dataclass(frozen=True)
class TransitionRule:
    """Target stage, permitted actors and an optional extra check."""

    to_stage: JobStage
    actors: FrozenSet[ActorType]
    guard: Optional[Guard] = None


def _only_original_assigner(job: "Job", actor: ActorType) -> Optional[str]:
    # Client-assigned jobs stay with the client, admin-assigned jobs with admins
    if job.assigned_by is not None and job.assigned_by != actor:
        return (
            f"This job is already assigned by {job.assigned_by.value}. "
            f"{actor.value.capitalize()} cannot reassign."
        )
    return None


_ADMIN = frozenset({ActorType.ADMIN})
_ASSIGNERS = frozenset({ActorType.CLIENT, ActorType.ADMIN})
_TRADESPERSON = frozenset({ActorType.TRADESPERSON})
_REVIEWERS = frozenset({ActorType.CLIENT, ActorType.TRADESPERSON})


TRANSITIONS: Dict[Tuple[JobStage, JobAction], TransitionRule] = {
    # Approval is idempotent in every stage
    (JobStage.PENDING_APPROVAL, JobAction.APPROVE): TransitionRule(JobStage.OPEN, _ADMIN),
    (JobStage.OPEN, JobAction.APPROVE): TransitionRule(JobStage.OPEN, _ADMIN),
    (JobStage.IN_PROGRESS, JobAction.APPROVE): TransitionRule(JobStage.IN_PROGRESS, _ADMIN),
    (JobStage.COMPLETED, JobAction.APPROVE): TransitionRule(JobStage.COMPLETED, _ADMIN),
    (JobStage.REVIEWED, JobAction.APPROVE): TransitionRule(JobStage.REVIEWED, _ADMIN),
    (JobStage.OPEN, JobAction.APPLY): TransitionRule(JobStage.OPEN, _TRADESPERSON),
    (JobStage.OPEN, JobAction.ASSIGN): TransitionRule(JobStage.IN_PROGRESS, _ASSIGNERS),
    (JobStage.IN_PROGRESS, JobAction.ASSIGN): TransitionRule(
        JobStage.IN_PROGRESS, _ASSIGNERS, guard=_only_original_assigner
    ),
    (JobStage.OPEN, JobAction.REJECT_APPLICATION): TransitionRule(JobStage.OPEN, _ASSIGNERS),
    (JobStage.IN_PROGRESS, JobAction.REJECT_APPLICATION): TransitionRule(
        JobStage.IN_PROGRESS, _ASSIGNERS
    ),
    (JobStage.IN_PROGRESS, JobAction.COMPLETE): TransitionRule(JobStage.COMPLETED, _ASSIGNERS),
    (JobStage.COMPLETED, JobAction.RATE): TransitionRule(JobStage.REVIEWED, _REVIEWERS),
    (JobStage.REVIEWED, JobAction.RATE): TransitionRule(JobStage.REVIEWED, _REVIEWERS),
}


_REJECTION_REASONS: Dict[Tuple[JobStage, JobAction], str] = {
    (JobStage.PENDING_APPROVAL, JobAction.APPLY): "Job is not approved yet",
    (JobStage.IN_PROGRESS, JobAction.APPLY): "Job has already been assigned",
    (JobStage.COMPLETED, JobAction.APPLY): "Job is already completed",
    (JobStage.REVIEWED, JobAction.APPLY): "Job is already completed",
    (JobStage.PENDING_APPROVAL, JobAction.ASSIGN): "Job must be approved before it can be assigned",
    (JobStage.COMPLETED, JobAction.ASSIGN): "Completed jobs cannot be reassigned",
    (JobStage.REVIEWED, JobAction.ASSIGN): "Completed jobs cannot be reassigned",
    (JobStage.PENDING_APPROVAL, JobAction.COMPLETE): "Job cannot be completed before it is assigned",
    (JobStage.OPEN, JobAction.COMPLETE): "Job cannot be completed before it is assigned",
    (JobStage.COMPLETED, JobAction.COMPLETE): "Job is already completed",
    (JobStage.REVIEWED, JobAction.COMPLETE): "Job is already completed",
    (JobStage.COMPLETED, JobAction.REJECT_APPLICATION): "Applications cannot change once the job is completed",
    (JobStage.REVIEWED, JobAction.REJECT_APPLICATION): "Applications cannot change once the job is completed",
}


def decide(job: "Job", action: JobAction, actor: ActorType) -> Decision:
    """Decide whether ``actor`` may perform ``action`` on ``job``."""
    stage = job.stage
    rule = TRANSITIONS.get((stage, action))

    if rule is None:
        reason = _REJECTION_REASONS.get(
            (stage, action),
            f"Cannot {action.value.replace('_', ' ')} a job that is {stage.value.replace('_', ' ')}",
        )
        return Rejected(action=action, stage=stage, reason=reason)

    if actor not in rule.actors:
        return Rejected(
            action=action,
            stage=stage,
            reason=f"{actor.value.capitalize()} is not allowed to {action.value.replace('_', ' ')} this job",
            not_permitted=True,
        )

    if rule.guard is not None:
        reason = rule.guard(job, actor)
        if reason:
            return Rejected(action=action, stage=stage, reason=reason, not_permitted=True)

    return Allowed(action=action, from_stage=stage, to_stage=rule.to_stage)
