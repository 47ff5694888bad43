"""Interest API endpoints.

Provides:
- POST /interests: Express interest in another profile (notifies the target)
- GET /interests/received: Interests other profiles expressed in the caller
- POST /interests/accept: Accept a received interest, making it mutual
"""

from typing import List

from fastapi import APIRouter, Depends, status

from ..dependencies import get_current_profile, get_interest_ledger, get_profile_store
from ..domain.interests.ledger import InterestLedger
from ..domain.profiles.models import Profile
from ..domain.profiles.ports import ProfileStore
from .schemas import (
    AcceptInterestRequest,
    ExpressInterestRequest,
    InterestActionResponse,
    InterestResponse,
    ReceivedInterestResponse,
)

router = APIRouter(prefix="/interests", tags=["Interests"])


@router.post("", response_model=InterestActionResponse, status_code=status.HTTP_201_CREATED)
def express_interest(
    request: ExpressInterestRequest,
    current_profile: Profile = Depends(get_current_profile),
    ledger: InterestLedger = Depends(get_interest_ledger),
):
    """Express interest in another profile.

    The target is emailed the caller's details; the interest is stored only
    if that email was sent.

    Raises:
        ProfileNotFoundError (404): Target profile does not exist
        DuplicateInterestError (409): Interest already expressed
        NotificationFailedError (502): Email could not be sent
    """
    record = ledger.express_interest(current_profile.id, request.to_profile_id)
    return InterestActionResponse(
        message="Interest email sent successfully",
        interest=InterestResponse.model_validate(record),
    )


@router.get("/received", response_model=List[ReceivedInterestResponse])
def list_received_interests(
    current_profile: Profile = Depends(get_current_profile),
    ledger: InterestLedger = Depends(get_interest_ledger),
    profiles: ProfileStore = Depends(get_profile_store),
):
    records = ledger.received_interests(current_profile.id)
    senders = {
        profile.id: profile
        for profile in profiles.find_many({record.from_profile_id for record in records})
    }

    received = []
    for record in records:
        sender = senders.get(record.from_profile_id)
        received.append(ReceivedInterestResponse(
            interest_id=record.id,
            from_profile_id=record.from_profile_id,
            first_name=sender.first_name if sender else None,
            last_name=sender.last_name if sender else None,
            mutual=record.mutual,
            date_of_interest=record.created_at,
        ))
    return received


@router.post("/accept", response_model=InterestActionResponse)
def accept_interest(
    request: AcceptInterestRequest,
    current_profile: Profile = Depends(get_current_profile),
    ledger: InterestLedger = Depends(get_interest_ledger),
):
    """Accept the interest `from_profile_id` expressed in the caller.

    Raises:
        InterestNotFoundError (404): No such interest toward the caller
    """
    record = ledger.accept_interest(current_profile.id, request.from_profile_id)
    return InterestActionResponse(
        message="Match created successfully",
        interest=InterestResponse.model_validate(record),
    )
