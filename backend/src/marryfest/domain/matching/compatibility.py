"""Compatibility filter - derives the candidate predicate for a seeker.

The directional part of the rule (who may be taller/shorter, older/younger)
is a CompatibilityPolicy looked up by the seeker's gender. The default
registry covers the two genders the platform models:

- male seeker: candidates strictly shorter, same age or younger
- female seeker: candidates strictly taller, same age or older

A gender without a registered policy gets no height or age bound.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import Mapping, Optional

from ..errors import InvalidProfileError
from ..profiles.models import Gender, Profile
from ..profiles.predicate import (
    AgeBound,
    AgeDirection,
    CandidatePredicate,
    HeightBound,
    HeightDirection,
    calendar_age,
)

logger = logging.getLogger(__name__)

REQUIRED_SEEKER_FIELDS = ("gender", "height", "dob")


class CompatibilityPolicy(ABC):
    """Directional height/age rule applied on behalf of a seeker."""

    @abstractmethod
    def height_bound(self, seeker: Profile) -> Optional[HeightBound]:
        pass

    @abstractmethod
    def age_bound(self, seeker: Profile, today: date) -> Optional[AgeBound]:
        pass


class DirectionalPolicy(CompatibilityPolicy):
    """Policy defined by one height direction and one age direction."""

    def __init__(self, height_direction: HeightDirection, age_direction: AgeDirection):
        self.height_direction = height_direction
        self.age_direction = age_direction

    def height_bound(self, seeker: Profile) -> HeightBound:
        return HeightBound(reference=seeker.height, direction=self.height_direction)

    def age_bound(self, seeker: Profile, today: date) -> AgeBound:
        return AgeBound(
            reference_age=calendar_age(seeker.dob, today),
            direction=self.age_direction,
            today=today,
        )

    def __repr__(self) -> str:
        return f"DirectionalPolicy({self.height_direction.value}, {self.age_direction.value})"


SHORTER_AND_YOUNGER = DirectionalPolicy(HeightDirection.SHORTER, AgeDirection.YOUNGER_OR_EQUAL)
TALLER_AND_OLDER = DirectionalPolicy(HeightDirection.TALLER, AgeDirection.OLDER_OR_EQUAL)

DEFAULT_POLICIES: Mapping[Gender, CompatibilityPolicy] = {
    Gender.MALE: SHORTER_AND_YOUNGER,
    Gender.FEMALE: TALLER_AND_OLDER,
}


class CompatibilityFilter:
    """Stateless derivation of candidate predicates.

    Usage:
        compatibility = CompatibilityFilter()
        predicate = compatibility.derive_predicate(seeker, date.today())
        candidates = profile_store.query(predicate)
    """

    def __init__(self, policies: Optional[Mapping[Gender, CompatibilityPolicy]] = None):
        self.policies = dict(DEFAULT_POLICIES if policies is None else policies)

    def derive_predicate(self, seeker: Profile, today: date) -> CandidatePredicate:
        """Derive the predicate candidates must satisfy for this seeker.

        Args:
            seeker: Fully populated profile of the person browsing
            today: Current date; ages are computed against it

        Returns:
            CandidatePredicate (unsatisfiable when the seeker has no
            community preference)

        Raises:
            InvalidProfileError: If gender, height or dob is missing
        """
        missing = [name for name in REQUIRED_SEEKER_FIELDS if getattr(seeker, name) is None]
        if missing:
            raise InvalidProfileError(missing)

        height_bound = None
        age_bound = None
        policy = self.policies.get(seeker.gender)
        if policy is None:
            logger.warning(
                f"No compatibility policy for gender {seeker.gender}; height and age are not bounded",
                extra={"profile_id": seeker.id},
            )
        else:
            height_bound = policy.height_bound(seeker)
            age_bound = policy.age_bound(seeker, today)

        if seeker.community_preference is None:
            logger.info(
                "Seeker has no community preference; candidate set is empty",
                extra={"profile_id": seeker.id},
            )

        return CandidatePredicate(
            exclude_gender=seeker.gender,
            community_preference=seeker.community_preference,
            height_bound=height_bound,
            age_bound=age_bound,
        )
