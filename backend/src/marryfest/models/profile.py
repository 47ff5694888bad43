"""Profile SQLAlchemy model."""

from uuid import uuid4

from sqlalchemy import Column, Text, Integer, Date, DateTime, Uuid, CheckConstraint, Index

from .base import Base, utcnow


class Profile(Base):
    """Matrimony profile of a verified participant.

    One row per verified identity (email). Height is stored as two integer
    columns so the directional height comparison can be expressed in SQL
    as a lexicographic (feet, inches) comparison.
    """
    __tablename__ = "profile"

    id = Column(Uuid, primary_key=True, default=uuid4)
    email = Column(Text, nullable=False, unique=True)

    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=True)
    gender = Column(Text, nullable=False)  # male, female
    dob = Column(Date, nullable=False)
    height_feet = Column(Integer, nullable=False)
    height_inches = Column(Integer, nullable=False, default=0)

    religion = Column(Text, nullable=True)
    community = Column(Text, nullable=True)
    community_preference = Column(Text, nullable=True)
    marital_status = Column(Text, nullable=True)

    city = Column(Text, nullable=True)
    state = Column(Text, nullable=True)
    country = Column(Text, nullable=True)
    contact = Column(Text, nullable=True)

    time_of_birth = Column(Text, nullable=True)
    place_of_birth = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        CheckConstraint("gender IN ('male', 'female')", name="ck_profile_gender"),
        CheckConstraint("height_inches >= 0 AND height_inches <= 11", name="ck_profile_height_inches"),
        Index("idx_profile_candidates", "gender", "community_preference"),
    )
