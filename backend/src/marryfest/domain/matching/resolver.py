"""Match resolver - derives the match set of a profile from mutual interests."""

from typing import Iterable
from uuid import UUID

from ..interests.models import InterestRecord
from ..interests.ports import InterestRepository


def collect_match_ids(profile_id: UUID, records: Iterable[InterestRecord]) -> set[UUID]:
    """Collect the other side of every mutual record involving a profile.

    Pending records and records not involving the profile are ignored.
    The profile itself is never part of the result, even if a
    self-referential record exists.

    Args:
        profile_id: Profile whose matches are wanted
        records: Candidate interest records (any direction, any status)

    Returns:
        Distinct ids of matched profiles
    """
    matches = set()
    for record in records:
        if not record.mutual:
            continue
        if record.from_profile_id == profile_id:
            other = record.to_profile_id
        elif record.to_profile_id == profile_id:
            other = record.from_profile_id
        else:
            continue
        if other != profile_id:
            matches.add(other)
    return matches


class MatchResolver:
    """Resolves match sets through the interest repository.

    Returns identities only; loading full profiles and ordering them is
    left to the caller.
    """

    def __init__(self, interests: InterestRepository):
        self.interests = interests

    def resolve_matches(self, profile_id: UUID) -> set[UUID]:
        return collect_match_ids(profile_id, self.interests.list_mutual_for(profile_id))
