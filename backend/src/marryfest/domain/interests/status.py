"""Interest status state machine.

State Flow:
    PENDING → MUTUAL

PENDING is the state on creation. The only transition is taken when the
target of the interest accepts it. MUTUAL is terminal.
"""

from enum import Enum
from typing import List, Optional


class InterestStatus(str, Enum):
    """Interest status enumeration."""
    PENDING = "PENDING"
    MUTUAL = "MUTUAL"


ALLOWED_TRANSITIONS = {
    None: [InterestStatus.PENDING],  # Creation
    InterestStatus.PENDING: [InterestStatus.MUTUAL],
    InterestStatus.MUTUAL: [],  # Terminal state
}


class StateTransitionError(Exception):
    """Raised when an invalid state transition is attempted."""
    pass


def validate_transition(
    current_status: Optional[InterestStatus],
    new_status: InterestStatus
) -> None:
    """Validate that a state transition is allowed.

    Args:
        current_status: Current interest status (None for a new record)
        new_status: Target status to transition to

    Raises:
        StateTransitionError: If transition is not allowed
    """
    allowed = ALLOWED_TRANSITIONS.get(current_status, [])
    if new_status not in allowed:
        current = current_status.value if current_status else "NONE"
        raise StateTransitionError(
            f"Invalid transition: {current} -> {new_status.value}. "
            f"Allowed transitions from {current}: "
            f"{[s.value for s in allowed]}"
        )


def can_transition(
    current_status: Optional[InterestStatus],
    new_status: InterestStatus
) -> bool:
    """Check if a state transition is allowed without raising exception."""
    return new_status in ALLOWED_TRANSITIONS.get(current_status, [])


def get_allowed_transitions(status: Optional[InterestStatus]) -> List[InterestStatus]:
    """Get list of allowed transitions from a given status."""
    return ALLOWED_TRANSITIONS.get(status, [])
