"""User SQLAlchemy model"""

from uuid import uuid4

from sqlalchemy import Column, String, DateTime, CheckConstraint, UniqueConstraint
from sqlalchemy.orm import validates
import re

from .base import Base, utcnow


def _new_user_id() -> str:
    return str(uuid4())


class User(Base):
    """Staff user (admin, salesperson, designer, ops, manufacturer).

    User ids are opaque strings; validation results record who ran a
    validation and who acknowledged a warning by this id.
    """
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=_new_user_id)
    email = Column(String, nullable=False)
    name = Column(String, nullable=True)
    role = Column(String, nullable=False, default="ops")
    status = Column(String, nullable=False, default="ACTIVE")
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Constraints
    __table_args__ = (
        CheckConstraint(
            "role IN ('admin', 'sales', 'designer', 'ops', 'manufacturer')",
            name='ck_users_role'
        ),
        CheckConstraint(
            "status IN ('ACTIVE', 'DISABLED')",
            name='ck_users_status'
        ),
        UniqueConstraint('email', name='uq_users_email')
    )

    @validates('email')
    def validate_email(self, key, value):
        """Basic email format validation"""
        if not re.match(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$', value):
            raise ValueError("Invalid email format")
        return value.lower()
