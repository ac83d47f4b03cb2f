"""
Job Review SQLAlchemy model.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import relationship

from .base import BaseModel, utcnow


class JobReviewModel(BaseModel):
    """Job Review database model."""

    __tablename__ = "job_reviews"

    job_id = Column(Uuid(as_uuid=True), ForeignKey("jobs.id"), nullable=False, index=True)
    tradesperson_id = Column(
        Uuid(as_uuid=True), ForeignKey("tradespeople.id"), nullable=False, index=True
    )
    reviewer_type = Column(String(20), nullable=False)
    reviewer_id = Column(Uuid(as_uuid=True), nullable=False)
    rating = Column(Integer, nullable=False)
    review_text = Column(Text)
    reviewed_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    job = relationship("JobModel", back_populates="reviews")

    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_job_reviews_rating"),
        Index(
            "idx_job_reviews_reviewer",
            "job_id",
            "tradesperson_id",
            "reviewer_type",
            "reviewer_id",
        ),
    )

    def __repr__(self) -> str:
        return f"<JobReview(id={self.id}, job_id={self.job_id}, rating={self.rating})>"
