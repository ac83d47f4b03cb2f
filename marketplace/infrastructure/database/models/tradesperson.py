"""
Tradesperson SQLAlchemy model.
"""

from sqlalchemy import Boolean, Column, Index, Integer, Numeric, String

from .base import BaseModel


class TradespersonModel(BaseModel):
    """Tradesperson database model."""

    __tablename__ = "tradespeople"

    email = Column(String(255), nullable=False, unique=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False, default="")
    phone = Column(String(30))
    trade = Column(String(100), nullable=False, index=True)
    postcode = Column(String(10), nullable=False)
    years_experience = Column(Integer)
    hourly_rate = Column(Numeric(precision=10, scale=2, asdecimal=False))

    # Admin gates
    is_verified = Column(Boolean, default=False, nullable=False)
    is_approved = Column(Boolean, default=False, nullable=False, index=True)
    is_active = Column(Boolean, default=True, nullable=False)

    __table_args__ = (
        Index("idx_tradespeople_trade_approved", "trade", "is_approved"),
    )

    def __repr__(self) -> str:
        return f"<Tradesperson(id={self.id}, trade={self.trade})>"
