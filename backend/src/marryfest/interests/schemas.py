"""Pydantic schemas for interest endpoints."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from ..domain.interests.status import InterestStatus


class ExpressInterestRequest(BaseModel):
    """Request to express interest in another profile."""
    to_profile_id: UUID


class AcceptInterestRequest(BaseModel):
    """Request to accept the interest another profile expressed in the caller."""
    from_profile_id: UUID


class InterestResponse(BaseModel):
    """Interest record as returned by the API."""
    id: Optional[UUID]
    from_profile_id: UUID
    to_profile_id: UUID
    mutual: bool
    status: InterestStatus
    created_at: Optional[datetime]
    mutual_at: Optional[datetime]

    class Config:
        from_attributes = True


class InterestActionResponse(BaseModel):
    message: str
    interest: InterestResponse


class ReceivedInterestResponse(BaseModel):
    """Interest received by the caller, with the sender's name."""
    interest_id: Optional[UUID]
    from_profile_id: UUID
    first_name: Optional[str]
    last_name: Optional[str]
    mutual: bool
    date_of_interest: Optional[datetime]
