"""Interest SQLAlchemy model."""

from uuid import uuid4

from sqlalchemy import (
    Column,
    Boolean,
    DateTime,
    ForeignKey,
    Index,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship

from .base import Base, utcnow


class Interest(Base):
    """One-directional interest from one profile toward another.

    The unique constraint on (from_profile_id, to_profile_id) is what makes
    the duplicate check-and-create atomic under concurrent requests.
    mutual flips to true once, when the target accepts; mutual_at records
    when that happened.
    """
    __tablename__ = "interest"

    id = Column(Uuid, primary_key=True, default=uuid4)
    from_profile_id = Column(Uuid, ForeignKey("profile.id", ondelete="CASCADE"), nullable=False)
    to_profile_id = Column(Uuid, ForeignKey("profile.id", ondelete="CASCADE"), nullable=False)

    mutual = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    mutual_at = Column(DateTime(timezone=True), nullable=True)

    from_profile = relationship("Profile", foreign_keys=[from_profile_id])
    to_profile = relationship("Profile", foreign_keys=[to_profile_id])

    __table_args__ = (
        UniqueConstraint("from_profile_id", "to_profile_id", name="uq_interest_from_to"),
        Index("idx_interest_to_profile", "to_profile_id"),
        Index("idx_interest_mutual", "mutual"),
    )
