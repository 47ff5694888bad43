"""Domain exceptions for profiles, interests and matches.

Every failure of the matching core is raised as a subclass of
MatrimonyError. The HTTP layer translates them into status codes; the
core itself never retries or swallows them.
"""

from typing import Optional
from uuid import UUID


class MatrimonyError(Exception):
    """Base exception for matching-core errors."""
    pass


class NotFoundError(MatrimonyError):
    """A referenced profile or interest record does not exist."""
    pass


class ProfileNotFoundError(NotFoundError):
    """Raised when a profile id or identity does not resolve to a profile."""

    def __init__(self, reference):
        self.reference = reference
        super().__init__(f"Profile not found: {reference}")


class InterestNotFoundError(NotFoundError):
    """Raised when no interest exists for the ordered (from, to) pair."""

    def __init__(self, from_profile_id: UUID, to_profile_id: UUID):
        self.from_profile_id = from_profile_id
        self.to_profile_id = to_profile_id
        super().__init__(f"Interest not found: {from_profile_id} -> {to_profile_id}")


class DuplicateError(MatrimonyError):
    """A uniqueness rule would be violated."""
    pass


class DuplicateInterestError(DuplicateError):
    """Raised when interest was already expressed for the ordered pair."""

    def __init__(self, from_profile_id: UUID, to_profile_id: UUID):
        self.from_profile_id = from_profile_id
        self.to_profile_id = to_profile_id
        super().__init__(f"Interest already expressed: {from_profile_id} -> {to_profile_id}")


class DuplicateProfileError(DuplicateError):
    """Raised when a profile already exists for a verified identity."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Profile already exists for {email}")


class NotificationFailedError(MatrimonyError):
    """The interest notification was not delivered successfully."""

    def __init__(self, status: str, detail: Optional[str] = None):
        self.status = status
        self.detail = detail
        message = f"Notification failed with status '{status}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class NotificationDeliveryError(NotificationFailedError):
    """Transport-level failure (timeout, connection error) while sending."""

    def __init__(self, detail: str):
        super().__init__("transport_error", detail)


class InvalidInputError(MatrimonyError):
    """Malformed or missing input."""
    pass


class InvalidProfileError(InvalidInputError):
    """Raised when a profile lacks fields required for filter derivation."""

    def __init__(self, missing_fields: list[str]):
        self.missing_fields = missing_fields
        super().__init__(f"Profile is missing required fields: {', '.join(missing_fields)}")
