"""
Client SQLAlchemy model.
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from .base import BaseModel


class ClientModel(BaseModel):
    """Client database model."""

    __tablename__ = "clients"

    email = Column(String(255), nullable=False, unique=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False, default="")
    phone = Column(String(30))
    postcode = Column(String(10))

    jobs = relationship("JobModel", back_populates="client")

    def __repr__(self) -> str:
        return f"<Client(id={self.id}, email={self.email})>"
