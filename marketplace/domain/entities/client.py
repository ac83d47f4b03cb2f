"""
Client domain entity.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4


class Client:
    """Client entity representing a customer who posts jobs."""

    def __init__(
        self,
        email: str,
        first_name: str,
        last_name: str,
        id: Optional[UUID] = None,
        phone: Optional[str] = None,
        postcode: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        if not email or "@" not in email:
            raise ValueError("A valid email address is required")
        if not first_name or not first_name.strip():
            raise ValueError("First name is required")

        self.id = id or uuid4()
        self.email = email.strip().lower()
        self.first_name = first_name
        self.last_name = last_name
        self.phone = phone
        self.postcode = postcode
        self.created_at = created_at or datetime.now(timezone.utc)
        self.updated_at = updated_at or datetime.now(timezone.utc)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
