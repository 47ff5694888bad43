"""Candidate predicate - the filter a profile must satisfy to be shown to a seeker.

The predicate is a plain value object. It can be evaluated in memory with
CandidatePredicate.matches() and is translated into a SQL WHERE clause by
the profile repository, so both paths share the same bound semantics.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from .models import Gender, Height, Profile


def calendar_age(dob: date, today: date) -> int:
    """Age as a calendar-year difference.

    Only the years are subtracted; month and day are ignored, so someone
    born in December counts a full year older from January 1st.
    """
    return today.year - dob.year


class HeightDirection(str, Enum):
    """Which side of the seeker's height candidates must fall on."""
    SHORTER = "shorter"
    TALLER = "taller"


class AgeDirection(str, Enum):
    """Which side of the seeker's age candidates must fall on."""
    YOUNGER_OR_EQUAL = "younger_or_equal"
    OLDER_OR_EQUAL = "older_or_equal"


@dataclass(frozen=True)
class HeightBound:
    """Strict height bound relative to the seeker's height."""
    reference: Height
    direction: HeightDirection

    def admits(self, height: Optional[Height]) -> bool:
        if height is None:
            return False
        if self.direction == HeightDirection.SHORTER:
            return height < self.reference
        return height > self.reference


@dataclass(frozen=True)
class AgeBound:
    """Inclusive age bound relative to the seeker's calendar age.

    Attributes:
        reference_age: Seeker's age on `today` (year difference)
        direction: Whether candidates must be younger-or-equal or older-or-equal
        today: Date the ages are computed on
    """
    reference_age: int
    direction: AgeDirection
    today: date

    @property
    def reference_birth_year(self) -> int:
        """Birth year that yields exactly reference_age on `today`."""
        return self.today.year - self.reference_age

    def admits(self, dob: Optional[date]) -> bool:
        if dob is None:
            return False
        age = calendar_age(dob, self.today)
        if self.direction == AgeDirection.YOUNGER_OR_EQUAL:
            return age <= self.reference_age
        return age >= self.reference_age


@dataclass(frozen=True)
class CandidatePredicate:
    """Conjunctive filter over candidate profiles.

    Attributes:
        exclude_gender: Candidates must have a different gender than this
        community_preference: Candidates must share this exact preference.
            None makes the predicate unsatisfiable (empty candidate set).
        height_bound: Optional directional height bound
        age_bound: Optional directional age bound
    """
    exclude_gender: Gender
    community_preference: Optional[str]
    height_bound: Optional[HeightBound] = None
    age_bound: Optional[AgeBound] = None

    @property
    def is_satisfiable(self) -> bool:
        return self.community_preference is not None

    def matches(self, candidate: Profile) -> bool:
        """Evaluate the predicate against a single profile in memory."""
        if not self.is_satisfiable:
            return False
        if candidate.gender is None or candidate.gender == self.exclude_gender:
            return False
        if candidate.community_preference != self.community_preference:
            return False
        if self.height_bound is not None and not self.height_bound.admits(candidate.height):
            return False
        if self.age_bound is not None and not self.age_bound.admits(candidate.dob):
            return False
        return True
