"""
Job Application SQLAlchemy model.
"""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Numeric,
    String,
    Text,
    Uuid,
    text,
)
from sqlalchemy.orm import relationship

from marketplace.domain.value_objects.application_status import ApplicationStatus

from .base import BaseModel, utcnow


class JobApplicationModel(BaseModel):
    """Job Application database model."""

    __tablename__ = "job_applications"

    job_id = Column(Uuid(as_uuid=True), ForeignKey("jobs.id"), nullable=False, index=True)
    tradesperson_id = Column(
        Uuid(as_uuid=True), ForeignKey("tradespeople.id"), nullable=False, index=True
    )
    quotation_amount = Column(
        Numeric(precision=10, scale=2, asdecimal=False), nullable=False
    )
    quotation_notes = Column(Text)
    status = Column(
        String(20), nullable=False, default=ApplicationStatus.PENDING.value, index=True
    )
    applied_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    job = relationship("JobModel", back_populates="applications")
    tradesperson = relationship("TradespersonModel")

    __table_args__ = (
        # One application per tradesperson and job
        Index(
            "uq_job_applications_job_tradesperson",
            "job_id",
            "tradesperson_id",
            unique=True,
        ),
        # At most one accepted application per job
        Index(
            "uq_job_applications_one_accepted",
            "job_id",
            unique=True,
            postgresql_where=text("status = 'accepted'"),
            sqlite_where=text("status = 'accepted'"),
        ),
    )

    def __repr__(self) -> str:
        return f"<JobApplication(id={self.id}, job_id={self.job_id}, status={self.status})>"
