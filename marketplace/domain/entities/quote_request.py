"""Quote request and quote domain entities."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from marketplace.domain.exceptions.workflow_error import InvalidTransitionError
from marketplace.domain.value_objects.quote_status import QuoteRequestStatus, QuoteStatus


@dataclass
class QuoteRequest:
    """A customer's request for a quote from one specific tradesperson."""

    tradesperson_id: UUID
    customer_name: str
    customer_email: str
    project_description: str
    customer_phone: Optional[str] = None
    project_type: Optional[str] = None
    location: Optional[str] = None
    timeframe: Optional[str] = None
    budget_range: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    status: QuoteRequestStatus = QuoteRequestStatus.PENDING
    admin_approved: bool = False
    tradesperson_quoted: bool = False
    client_approved: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate quote request data."""
        if not self.customer_name or not self.customer_name.strip():
            raise ValueError("Customer name is required")
        if not self.customer_email or "@" not in self.customer_email:
            raise ValueError("A valid customer email is required")
        if not self.project_description or not self.project_description.strip():
            raise ValueError("Project description is required")

        self.customer_email = self.customer_email.strip().lower()
        self.status = QuoteRequestStatus(self.status)

        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = datetime.now(timezone.utc)

    @property
    def chat_enabled(self) -> bool:
        return self.client_approved

    def _move_to(self, target: QuoteRequestStatus) -> None:
        if not self.status.can_transition_to(target):
            raise InvalidTransitionError(
                f"Quote request is {self.status.value} and cannot become {target.value}",
                current_state=self.status.value,
            )
        self.status = target
        self.updated_at = datetime.now(timezone.utc)

    def approve_by_admin(self) -> None:
        self._move_to(QuoteRequestStatus.ADMIN_APPROVED)
        self.admin_approved = True

    def reject_by_admin(self) -> None:
        self._move_to(QuoteRequestStatus.REJECTED)

    def record_quote(self) -> None:
        self._move_to(QuoteRequestStatus.QUOTED)
        self.tradesperson_quoted = True

    def approve_by_client(self) -> None:
        self._move_to(QuoteRequestStatus.CLIENT_APPROVED)
        self.client_approved = True

    def reject_by_client(self) -> None:
        self._move_to(QuoteRequestStatus.QUOTE_REJECTED)


@dataclass
class Quote:
    """A tradesperson's priced answer to a quote request."""

    quote_request_id: UUID
    tradesperson_id: UUID
    quote_amount: float
    quote_description: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    status: QuoteStatus = QuoteStatus.PENDING
    created_at: Optional[datetime] = None

    def __post_init__(self):
        if self.quote_amount is None or self.quote_amount <= 0:
            raise ValueError("Quote amount must be a positive number")
        self.status = QuoteStatus(self.status)
        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)

    @property
    def is_pending(self) -> bool:
        return self.status == QuoteStatus.PENDING

    def _respond(self, target: QuoteStatus) -> None:
        if not self.is_pending:
            raise InvalidTransitionError(
                f"Quote has already been answered ({self.status.value})",
                current_state=self.status.value,
            )
        self.status = target

    def approve(self) -> None:
        self._respond(QuoteStatus.CLIENT_APPROVED)

    def reject(self) -> None:
        self._respond(QuoteStatus.CLIENT_REJECTED)
