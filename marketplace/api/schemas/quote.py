"""
Quote request pipeline API schemas.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from marketplace.domain.value_objects.approval_action import ApprovalAction
from marketplace.domain.value_objects.quote_status import QuoteRequestStatus, QuoteStatus

from .common import BaseResponse, CamelRequest, RecordResponse


class QuoteRequestCreateRequest(CamelRequest):
    """Customer quote request schema."""

    tradesperson_id: UUID
    customer_name: str = Field(..., min_length=1, max_length=255)
    customer_email: str = Field(..., min_length=3, max_length=255)
    customer_phone: Optional[str] = Field(None, max_length=30)
    project_type: Optional[str] = Field(None, max_length=100)
    project_description: str = Field(..., min_length=1, max_length=5000)
    location: Optional[str] = Field(None, max_length=255)
    timeframe: Optional[str] = Field(None, max_length=100)
    budget_range: Optional[str] = Field(None, max_length=100)


class ReviewQuoteRequestRequest(CamelRequest):
    quote_request_id: UUID
    action: ApprovalAction


class SubmitQuoteRequest(CamelRequest):
    quote_request_id: UUID
    tradesperson_id: UUID
    quote_amount: float
    quote_description: Optional[str] = Field(None, max_length=5000)


class RespondToQuoteRequest(CamelRequest):
    quote_id: UUID
    action: ApprovalAction


class QuoteResponse(RecordResponse):
    id: UUID
    quote_request_id: UUID
    tradesperson_id: UUID
    quote_amount: float
    quote_description: Optional[str] = None
    status: QuoteStatus
    created_at: datetime


class QuoteRequestResponse(RecordResponse):
    """Quote request response schema."""

    id: UUID
    tradesperson_id: UUID
    customer_name: str
    customer_email: str
    customer_phone: Optional[str] = None
    project_type: Optional[str] = None
    project_description: str
    location: Optional[str] = None
    timeframe: Optional[str] = None
    budget_range: Optional[str] = None
    status: QuoteRequestStatus
    admin_approved: bool
    tradesperson_quoted: bool
    client_approved: bool
    chat_enabled: bool
    created_at: datetime
    updated_at: datetime


class CustomerQuoteRequestResponse(QuoteRequestResponse):
    quote: Optional[QuoteResponse] = None


class QuoteRequestEnvelope(BaseResponse):
    quote_request: QuoteRequestResponse


class QuoteRequestsListResponse(BaseResponse):
    quote_requests: List[QuoteRequestResponse]


class CustomerQuoteRequestsListResponse(BaseResponse):
    quote_requests: List[CustomerQuoteRequestResponse]


class QuoteDecisionResponse(BaseResponse):
    quote: QuoteResponse
    quote_request: QuoteRequestResponse
