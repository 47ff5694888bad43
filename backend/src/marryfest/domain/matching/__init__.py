"""Matching domain module.

- CompatibilityFilter: candidate predicate per seeker (gender, community
  preference, directional height and age bounds)
- MatchResolver: match set of a profile, derived from mutual interests
"""

from .compatibility import (
    CompatibilityFilter,
    CompatibilityPolicy,
    DirectionalPolicy,
    DEFAULT_POLICIES,
    SHORTER_AND_YOUNGER,
    TALLER_AND_OLDER,
)
from .resolver import MatchResolver, collect_match_ids

__all__ = [
    "CompatibilityFilter",
    "CompatibilityPolicy",
    "DirectionalPolicy",
    "DEFAULT_POLICIES",
    "SHORTER_AND_YOUNGER",
    "TALLER_AND_OLDER",
    "MatchResolver",
    "collect_match_ids",
]
