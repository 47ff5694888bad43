"""Interests domain module - interest records, status machine, ledger.

The mutual flag on the original interest record is the only source of
truth for a match; there is no separate match entity.
"""

from .status import (
    InterestStatus,
    StateTransitionError,
    can_transition,
    validate_transition,
    ALLOWED_TRANSITIONS,
)
from .models import InterestRecord
from .ports import InterestRepository
from .ledger import InterestLedger

__all__ = [
    "InterestStatus",
    "StateTransitionError",
    "can_transition",
    "validate_transition",
    "ALLOWED_TRANSITIONS",
    "InterestRecord",
    "InterestRepository",
    "InterestLedger",
]
