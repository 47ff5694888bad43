"""InterestRepository port interface (hexagonal architecture)."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from .models import InterestRecord


class InterestRepository(ABC):
    """Port interface for interest persistence.

    Records are keyed by the ordered (from, to) pair. add() stages a record
    inside the current unit of work; nothing is visible to other requests
    until commit(). Implementations must make the duplicate check atomic
    (unique constraint or equivalent).
    """

    @abstractmethod
    def get(self, from_profile_id: UUID, to_profile_id: UUID) -> Optional[InterestRecord]:
        """Get the record for the ordered pair, or None."""
        pass

    @abstractmethod
    def add(self, record: InterestRecord) -> InterestRecord:
        """Stage a new record in the current unit of work.

        Returns:
            The staged record with its id populated

        Raises:
            DuplicateInterestError: If a record for the ordered pair exists
        """
        pass

    @abstractmethod
    def mark_mutual(
        self,
        from_profile_id: UUID,
        to_profile_id: UUID,
        at: datetime
    ) -> Optional[InterestRecord]:
        """Flip a pending record to mutual.

        Must be a no-op for a record that is already mutual, so mutual_at
        keeps the time of the first accept.

        Returns:
            The record after the update, or None if it does not exist
        """
        pass

    @abstractmethod
    def list_received(self, profile_id: UUID) -> list[InterestRecord]:
        """Records targeted at a profile, newest first."""
        pass

    @abstractmethod
    def list_mutual_for(self, profile_id: UUID) -> list[InterestRecord]:
        """Mutual records where the profile is on either side."""
        pass

    @abstractmethod
    def commit(self) -> None:
        pass

    @abstractmethod
    def rollback(self) -> None:
        pass
