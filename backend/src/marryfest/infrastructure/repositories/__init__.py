"""SQLAlchemy repositories implementing the domain ports."""

from .profile_repository import SqlAlchemyProfileStore, build_candidate_filter
from .interest_repository import SqlAlchemyInterestRepository

__all__ = [
    "SqlAlchemyProfileStore",
    "SqlAlchemyInterestRepository",
    "build_candidate_filter",
]
