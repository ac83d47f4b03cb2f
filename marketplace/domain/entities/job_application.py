"""Job application domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from marketplace.domain.exceptions.workflow_error import InvalidTransitionError
from marketplace.domain.value_objects.application_status import ApplicationStatus


@dataclass
class JobApplication:
    """A tradesperson's quotation against a job."""

    job_id: UUID
    tradesperson_id: UUID
    quotation_amount: float
    quotation_notes: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    status: ApplicationStatus = ApplicationStatus.PENDING
    applied_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate application data."""
        if self.quotation_amount is None or self.quotation_amount <= 0:
            raise ValueError("Quotation amount must be a positive number")

        self.status = ApplicationStatus(self.status)

        if not self.applied_at:
            self.applied_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = self.applied_at

    @property
    def is_pending(self) -> bool:
        return self.status == ApplicationStatus.PENDING

    def accept(self) -> None:
        """Mark the application as the chosen one for its job."""
        if self.status == ApplicationStatus.ACCEPTED:
            raise InvalidTransitionError(
                "Application has already been accepted", current_state=self.status.value
            )
        self.status = ApplicationStatus.ACCEPTED
        self.updated_at = datetime.now(timezone.utc)

    def reject(self) -> None:
        """Turn down a pending application."""
        if not self.is_pending:
            raise InvalidTransitionError(
                f"Only pending applications can be rejected, this one is {self.status.value}",
                current_state=self.status.value,
            )
        self.status = ApplicationStatus.REJECTED
        self.updated_at = datetime.now(timezone.utc)
