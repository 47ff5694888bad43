"""Interest ledger - expressing and accepting interest.

Expressing interest is coupled to the notification: the record is staged
first (so the unique (from, to) constraint is checked atomically), then
the notification is sent, and the record is committed only if the send
succeeded. Any failure rolls the staged record back.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional
from uuid import UUID

from ..errors import (
    DuplicateInterestError,
    InterestNotFoundError,
    InvalidInputError,
    NotificationFailedError,
    ProfileNotFoundError,
)
from ..notifications.ports import NotificationPort
from ..notifications.templates import build_interest_notification
from ..profiles.ports import ProfileStore
from .models import InterestRecord
from .ports import InterestRepository
from .status import InterestStatus, validate_transition

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InterestLedger:
    """Records interest between profiles and promotes it to mutual.

    Args:
        profiles: Profile store used to resolve both sides of an interest
        interests: Repository holding interest records
        notifier: Transport for the interest notification
        clock: Returns the current timestamp (injectable for tests)
    """

    def __init__(
        self,
        profiles: ProfileStore,
        interests: InterestRepository,
        notifier: NotificationPort,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.profiles = profiles
        self.interests = interests
        self.notifier = notifier
        self.clock = clock or _utcnow

    def express_interest(self, from_profile_id: UUID, to_profile_id: UUID) -> InterestRecord:
        """Record that one profile is interested in another and notify the target.

        Args:
            from_profile_id: Profile expressing interest
            to_profile_id: Profile the interest is directed at

        Returns:
            The committed InterestRecord (pending)

        Raises:
            InvalidInputError: If both ids are the same profile
            ProfileNotFoundError: If either profile does not exist
            DuplicateInterestError: If interest was already expressed for the pair
            NotificationFailedError: If the notification was not delivered;
                no record is persisted in that case
        """
        if from_profile_id == to_profile_id:
            raise InvalidInputError("A profile cannot express interest in itself")

        sender = self.profiles.find_by_id(from_profile_id)
        if sender is None:
            raise ProfileNotFoundError(from_profile_id)

        recipient = self.profiles.find_by_id(to_profile_id)
        if recipient is None:
            raise ProfileNotFoundError(to_profile_id)

        if self.interests.get(from_profile_id, to_profile_id) is not None:
            raise DuplicateInterestError(from_profile_id, to_profile_id)

        validate_transition(None, InterestStatus.PENDING)
        record = self.interests.add(InterestRecord(
            from_profile_id=from_profile_id,
            to_profile_id=to_profile_id,
            created_at=self.clock(),
        ))

        notification = build_interest_notification(sender, recipient)
        try:
            result = self.notifier.send(notification)
        except Exception:
            self.interests.rollback()
            logger.error(
                "Interest notification raised; interest discarded",
                extra={"from_profile_id": str(from_profile_id), "to_profile_id": str(to_profile_id)},
                exc_info=True,
            )
            raise

        if not result.success:
            self.interests.rollback()
            logger.warning(
                f"Interest notification failed with status {result.status}; interest discarded",
                extra={"from_profile_id": str(from_profile_id), "to_profile_id": str(to_profile_id)},
            )
            raise NotificationFailedError(result.status, result.detail)

        self.interests.commit()
        logger.info(
            "Interest expressed",
            extra={"from_profile_id": str(from_profile_id), "to_profile_id": str(to_profile_id)},
        )
        return record

    def accept_interest(self, to_profile_id: UUID, from_profile_id: UUID) -> InterestRecord:
        """Accept the interest `from_profile_id` expressed in `to_profile_id`.

        Only the original direction is looked up; the reverse pair never
        matches. Accepting an already mutual interest is a no-op.

        Args:
            to_profile_id: Profile accepting (target of the original interest)
            from_profile_id: Profile that originally expressed interest

        Returns:
            The mutual InterestRecord

        Raises:
            InterestNotFoundError: If no interest exists from `from_profile_id`
                to `to_profile_id`
        """
        record = self.interests.get(from_profile_id, to_profile_id)
        if record is None:
            raise InterestNotFoundError(from_profile_id, to_profile_id)

        if record.status == InterestStatus.MUTUAL:
            logger.info(
                "Interest already mutual",
                extra={"from_profile_id": str(from_profile_id), "to_profile_id": str(to_profile_id)},
            )
            return record

        validate_transition(record.status, InterestStatus.MUTUAL)
        updated = self.interests.mark_mutual(from_profile_id, to_profile_id, self.clock())
        if updated is None:
            self.interests.rollback()
            raise InterestNotFoundError(from_profile_id, to_profile_id)

        self.interests.commit()
        logger.info(
            "Interest accepted",
            extra={"from_profile_id": str(from_profile_id), "to_profile_id": str(to_profile_id)},
        )
        return updated

    def get_interest(self, from_profile_id: UUID, to_profile_id: UUID) -> Optional[InterestRecord]:
        return self.interests.get(from_profile_id, to_profile_id)

    def received_interests(self, profile_id: UUID) -> list[InterestRecord]:
        """Interests other profiles expressed in this one, newest first."""
        return self.interests.list_received(profile_id)
