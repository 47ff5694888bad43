"""ProfileStore port interface (hexagonal architecture)."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional
from uuid import UUID

from .models import Profile
from .predicate import CandidatePredicate


class ProfileStore(ABC):
    """Port interface for profile persistence.

    Identity lookups return a single Profile or None; implementations must
    enforce uniqueness of the identity so callers never index into a list.
    """

    @abstractmethod
    def find_by_identity(self, email: str) -> Optional[Profile]:
        """Find the profile owned by a verified identity.

        Args:
            email: Verified email of the profile owner

        Returns:
            Profile or None if the identity has no profile yet
        """
        pass

    @abstractmethod
    def find_by_id(self, profile_id: UUID) -> Optional[Profile]:
        """Find a profile by its id."""
        pass

    @abstractmethod
    def find_many(self, profile_ids: Iterable[UUID]) -> list[Profile]:
        """Load several profiles at once; unknown ids are skipped."""
        pass

    @abstractmethod
    def query(self, predicate: CandidatePredicate) -> list[Profile]:
        """Return all profiles satisfying a candidate predicate.

        Args:
            predicate: Predicate derived by CompatibilityFilter

        Returns:
            Matching profiles (empty when the predicate is unsatisfiable)
        """
        pass

    @abstractmethod
    def save(self, profile: Profile) -> Profile:
        """Create a profile.

        Raises:
            DuplicateProfileError: If the identity already owns a profile
        """
        pass
