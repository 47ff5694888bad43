"""Profile API endpoints.

Provides:
- POST /profiles: Create the caller's profile (once per verified identity)
- GET /profiles/me: The caller's profile
- GET /profiles/candidates: Profiles compatible with the caller
"""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..auth.dependencies import get_current_identity
from ..database import get_db
from ..dependencies import get_compatibility_filter, get_current_profile, get_profile_store
from ..domain.matching.compatibility import CompatibilityFilter
from ..domain.profiles.models import Profile
from ..domain.profiles.ports import ProfileStore
from ..observability.logging_config import get_logger
from .schemas import ProfileCreate, ProfileCreateResponse, ProfileResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/profiles", tags=["Profiles"])


@router.post("", response_model=ProfileCreateResponse, status_code=status.HTTP_201_CREATED)
def create_profile(
    profile_data: ProfileCreate,
    identity: str = Depends(get_current_identity),
    profiles: ProfileStore = Depends(get_profile_store),
    db: Session = Depends(get_db),
):
    """Create the profile of the authenticated identity.

    Raises:
        DuplicateProfileError (409): If the identity already has a profile
    """
    profile = profiles.save(profile_data.to_domain(identity))
    db.commit()

    logger.info("Profile created", extra={"profile_id": profile.id})
    return ProfileCreateResponse(
        message="Profile created successfully",
        profile=ProfileResponse.model_validate(profile),
    )


@router.get("/me", response_model=ProfileResponse)
def read_own_profile(current_profile: Profile = Depends(get_current_profile)):
    return ProfileResponse.model_validate(current_profile)


@router.get("/candidates", response_model=List[ProfileResponse])
def list_candidates(
    current_profile: Profile = Depends(get_current_profile),
    profiles: ProfileStore = Depends(get_profile_store),
    compatibility: CompatibilityFilter = Depends(get_compatibility_filter),
):
    """List profiles compatible with the caller.

    Candidates have the other gender, the same community preference and
    fall on the caller's side of the directional height and age bounds.
    """
    predicate = compatibility.derive_predicate(current_profile, date.today())
    candidates = profiles.query(predicate)
    return [ProfileResponse.model_validate(candidate) for candidate in candidates]
