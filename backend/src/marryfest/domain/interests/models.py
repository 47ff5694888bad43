"""Interest domain models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from .status import InterestStatus


@dataclass
class InterestRecord:
    """Interest expressed by one profile in another.

    Attributes:
        from_profile_id: Profile that expressed the interest
        to_profile_id: Profile the interest is directed at
        mutual: True once the target accepted
        created_at: When the interest was expressed
        mutual_at: When the target accepted (None while pending)
        id: Storage id (None until persisted)
    """
    from_profile_id: UUID
    to_profile_id: UUID
    mutual: bool = False
    created_at: Optional[datetime] = None
    mutual_at: Optional[datetime] = None
    id: Optional[UUID] = None

    @property
    def status(self) -> InterestStatus:
        return InterestStatus.MUTUAL if self.mutual else InterestStatus.PENDING

    def involves(self, profile_id: UUID) -> bool:
        return profile_id in (self.from_profile_id, self.to_profile_id)
