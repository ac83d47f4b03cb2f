"""Tradesperson domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from marketplace.domain.value_objects.postcode import Postcode


@dataclass
class Tradesperson:
    """Tradesperson domain entity."""

    email: str
    first_name: str
    last_name: str
    trade: str
    postcode: str
    id: UUID = field(default_factory=uuid4)
    phone: Optional[str] = None
    years_experience: Optional[int] = None
    hourly_rate: Optional[float] = None
    is_verified: bool = False
    is_approved: bool = False
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate tradesperson data."""
        if not self.email or "@" not in self.email:
            raise ValueError("A valid email address is required")
        if not self.trade or not self.trade.strip():
            raise ValueError("Trade is required")

        self.email = self.email.strip().lower()
        self.postcode = Postcode(self.postcode).value

        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = datetime.now(timezone.utc)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def verify(self) -> None:
        """Mark documents as checked and the account as approved by an admin."""
        self.is_verified = True
        self.is_approved = True
        self.updated_at = datetime.now(timezone.utc)

    def can_apply(self) -> bool:
        """Check if the tradesperson may quote on jobs."""
        return self.is_active and self.is_approved

    def matches_trade(self, trade: str) -> bool:
        return self.trade.strip().lower() == (trade or "").strip().lower()

    @property
    def district(self) -> str:
        """Postal district the tradesperson works in."""
        return Postcode(self.postcode).outward_code
