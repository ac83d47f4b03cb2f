"""
Lifecycle checks with logging and metrics.
"""

from marketplace.config.logging import get_logger
from marketplace.domain.entities.job import Job
from marketplace.domain.lifecycle import Allowed, JobAction
from marketplace.domain.value_objects.actor_type import ActorType
from marketplace.infrastructure.monitoring.metrics import record_job_transition

logger = get_logger(__name__)


def check_transition(job: Job, action: JobAction, actor: ActorType) -> Allowed:
    """Consult the transition table before anything is mutated.

    Raises the rejection as a domain error.
    """
    decision = job.decide(action, ActorType(actor))

    if isinstance(decision, Allowed):
        record_job_transition(action.value, "allowed")
        return decision

    record_job_transition(action.value, "rejected")
    logger.warning(
        "Job action rejected",
        job_id=str(job.id),
        action=action.value,
        actor=ActorType(actor).value,
        stage=decision.stage.value,
        reason=decision.reason,
    )
    raise decision.to_exception()
