"""
Quote request and quote SQLAlchemy models.
"""

from sqlalchemy import Boolean, Column, ForeignKey, Numeric, String, Text, Uuid
from sqlalchemy.orm import relationship

from marketplace.domain.value_objects.quote_status import QuoteRequestStatus, QuoteStatus

from .base import BaseModel


class QuoteRequestModel(BaseModel):
    """Quote request database model."""

    __tablename__ = "quote_requests"

    tradesperson_id = Column(
        Uuid(as_uuid=True), ForeignKey("tradespeople.id"), nullable=False, index=True
    )
    customer_name = Column(String(255), nullable=False)
    customer_email = Column(String(255), nullable=False, index=True)
    customer_phone = Column(String(30))
    project_type = Column(String(100))
    project_description = Column(Text, nullable=False)
    location = Column(String(255))
    timeframe = Column(String(100))
    budget_range = Column(String(100))

    status = Column(
        String(30), nullable=False, default=QuoteRequestStatus.PENDING.value, index=True
    )
    admin_approved = Column(Boolean, default=False, nullable=False)
    tradesperson_quoted = Column(Boolean, default=False, nullable=False)
    client_approved = Column(Boolean, default=False, nullable=False)

    tradesperson = relationship("TradespersonModel")
    quotes = relationship(
        "QuoteModel",
        back_populates="quote_request",
        cascade="all, delete-orphan",
        order_by="QuoteModel.created_at.desc()",
    )


class QuoteModel(BaseModel):
    """Quote database model."""

    __tablename__ = "quotes"

    quote_request_id = Column(
        Uuid(as_uuid=True), ForeignKey("quote_requests.id"), nullable=False, index=True
    )
    tradesperson_id = Column(
        Uuid(as_uuid=True), ForeignKey("tradespeople.id"), nullable=False, index=True
    )
    quote_amount = Column(Numeric(precision=10, scale=2, asdecimal=False), nullable=False)
    quote_description = Column(Text)
    status = Column(String(30), nullable=False, default=QuoteStatus.PENDING.value)

    quote_request = relationship("QuoteRequestModel", back_populates="quotes")
