"""
Job SQLAlchemy model.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Numeric,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import relationship

from marketplace.domain.value_objects.job_stage import JobStage

from .base import BaseModel


class JobModel(BaseModel):
    """Job database model."""

    __tablename__ = "jobs"

    client_id = Column(
        Uuid(as_uuid=True), ForeignKey("clients.id"), nullable=False, index=True
    )
    trade = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=False)
    postcode = Column(String(10), nullable=False)
    budget = Column(Numeric(precision=10, scale=2, asdecimal=False), nullable=False)
    budget_type = Column(String(20), nullable=False, default="fixed")
    preferred_date = Column(Date)

    status = Column(
        String(30), nullable=False, default=JobStage.PENDING_APPROVAL.value, index=True
    )

    # Approval gate
    is_approved = Column(Boolean, default=False, nullable=False)
    approved_at = Column(DateTime(timezone=True))

    # Assignment
    assigned_tradesperson_id = Column(
        Uuid(as_uuid=True), ForeignKey("tradespeople.id"), nullable=True, index=True
    )
    assigned_by = Column(String(20))
    assigned_at = Column(DateTime(timezone=True))
    quotation_amount = Column(Numeric(precision=10, scale=2, asdecimal=False))
    quotation_notes = Column(Text)

    # Completion
    is_completed = Column(Boolean, default=False, nullable=False)
    completed_at = Column(DateTime(timezone=True))
    completed_by = Column(String(20))

    # Relationships
    client = relationship("ClientModel", back_populates="jobs")
    assigned_tradesperson = relationship("TradespersonModel")
    applications = relationship(
        "JobApplicationModel", back_populates="job", cascade="all, delete-orphan"
    )
    reviews = relationship(
        "JobReviewModel",
        back_populates="job",
        cascade="all, delete-orphan",
        order_by="JobReviewModel.reviewed_at",
    )

    __table_args__ = (
        Index("idx_jobs_trade_status", "trade", "status"),
        Index("idx_jobs_client_created", "client_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Job(id={self.id}, trade={self.trade}, status={self.status})>"
