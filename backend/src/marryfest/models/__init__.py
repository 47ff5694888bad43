"""SQLAlchemy Models for MarryFest"""

from .base import Base
from .profile import Profile
from .interest import Interest

__all__ = [
    "Base",
    "Profile",
    "Interest",
]
