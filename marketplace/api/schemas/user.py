"""
Client and tradesperson API schemas.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from .common import BaseResponse, CamelRequest, RecordResponse


class ClientCreateRequest(CamelRequest):
    """Client profile creation request."""

    email: str = Field(..., min_length=3, max_length=255)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field("", max_length=100)
    phone: Optional[str] = Field(None, max_length=30)
    postcode: Optional[str] = Field(None, max_length=10)


class TradespersonCreateRequest(CamelRequest):
    """Tradesperson profile creation request."""

    email: str = Field(..., min_length=3, max_length=255)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field("", max_length=100)
    phone: Optional[str] = Field(None, max_length=30)
    trade: str = Field(..., min_length=1, max_length=100)
    postcode: str = Field(..., min_length=2, max_length=10)
    years_experience: Optional[int] = Field(None, ge=0)
    hourly_rate: Optional[float] = Field(None, ge=0)


class VerifyTradespersonRequest(CamelRequest):
    tradesperson_id: UUID


class ClientResponse(RecordResponse):
    """Client response schema."""

    id: UUID
    email: str
    first_name: str
    last_name: str
    full_name: str
    phone: Optional[str] = None
    postcode: Optional[str] = None
    created_at: datetime


class TradespersonResponse(RecordResponse):
    """Tradesperson response schema."""

    id: UUID
    email: str
    first_name: str
    last_name: str
    full_name: str
    phone: Optional[str] = None
    trade: str
    postcode: str
    years_experience: Optional[int] = None
    hourly_rate: Optional[float] = None
    is_verified: bool
    is_approved: bool
    is_active: bool
    created_at: datetime


class ClientEnvelope(BaseResponse):
    client: ClientResponse


class TradespersonEnvelope(BaseResponse):
    tradesperson: TradespersonResponse


class TradespeopleListResponse(BaseResponse):
    tradespeople: List[TradespersonResponse]
