"""Profile domain models."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional
from uuid import UUID


class Gender(str, Enum):
    """Gender as modeled by the compatibility rules."""
    MALE = "male"
    FEMALE = "female"


@dataclass(frozen=True, order=True)
class Height:
    """Height in feet and inches.

    Ordering is lexicographic on (feet, inches), which is a true height
    ordering as long as inches stays within 0-11.
    """
    feet: int
    inches: int = 0

    def __str__(self) -> str:
        return f"{self.feet} feet {self.inches} inches"


@dataclass
class Profile:
    """A participant's matrimony profile.

    Only gender, dob, height and community_preference take part in
    compatibility filtering; the remaining fields are descriptive and
    feed the interest notification.
    """
    email: str
    first_name: str
    gender: Optional[Gender]
    dob: Optional[date]
    height: Optional[Height]
    id: Optional[UUID] = None
    last_name: Optional[str] = None
    religion: Optional[str] = None
    community: Optional[str] = None
    community_preference: Optional[str] = None
    marital_status: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    contact: Optional[str] = None
    time_of_birth: Optional[str] = None
    place_of_birth: Optional[str] = None

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


def normalize_identity(email: str) -> str:
    """Verified identities compare case-insensitively."""
    return email.strip().lower()
