"""Organization model - customer accounts that place orders"""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from sqlalchemy.orm import validates, relationship

from .base import Base, utcnow


class Organization(Base):
    """
    Organization model - a school, club, business or team buying merchandise.

    Orders and design jobs hang off an organization. Only the fields the
    validation layer and its tests touch are mapped here.
    """
    __tablename__ = "organizations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    city = Column(String, nullable=True)
    state = Column(String, nullable=True)
    shipping_address = Column(Text, nullable=True)
    client_type = Column(String, nullable=True)
    archived = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    orders = relationship("Order", back_populates="organization")
    design_jobs = relationship("DesignJob", back_populates="organization")

    @validates('name')
    def validate_name(self, key, value):
        """
        Ensure organization name is not empty and within length limits.

        Raises:
            ValueError: If name is empty/whitespace or exceeds 200 characters
        """
        if not value or len(value.strip()) == 0:
            raise ValueError("Organization name cannot be empty")
        if len(value) > 200:
            raise ValueError("Organization name cannot exceed 200 characters")
        return value.strip()

    def __repr__(self):
        return f"<Organization(id={self.id}, name='{self.name}')>"
