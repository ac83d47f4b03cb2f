"""
Quote request and quote status value objects.
"""

from enum import Enum


class QuoteRequestStatus(str, Enum):
    """Quote request status enumeration."""

    PENDING = "pending"
    ADMIN_APPROVED = "admin_approved"
    REJECTED = "rejected"
    QUOTED = "quoted"
    CLIENT_APPROVED = "client_approved"
    QUOTE_REJECTED = "quote_rejected"

    def can_transition_to(self, target: "QuoteRequestStatus") -> bool:
        """Check if moving to ``target`` is a legal step."""
        return target in _QUOTE_REQUEST_TRANSITIONS.get(self, ())

    def is_final(self) -> bool:
        """Check if status is final (no more processing)."""
        return not _QUOTE_REQUEST_TRANSITIONS.get(self)


_QUOTE_REQUEST_TRANSITIONS = {
    QuoteRequestStatus.PENDING: (
        QuoteRequestStatus.ADMIN_APPROVED,
        QuoteRequestStatus.REJECTED,
    ),
    QuoteRequestStatus.ADMIN_APPROVED: (QuoteRequestStatus.QUOTED,),
    QuoteRequestStatus.QUOTED: (
        QuoteRequestStatus.CLIENT_APPROVED,
        QuoteRequestStatus.QUOTE_REJECTED,
    ),
}


class QuoteStatus(str, Enum):
    """Quote status enumeration."""

    PENDING = "pending"
    CLIENT_APPROVED = "client_approved"
    CLIENT_REJECTED = "client_rejected"
