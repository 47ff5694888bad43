"""Match API endpoints."""

from typing import List

from fastapi import APIRouter, Depends

from ..dependencies import get_current_profile, get_match_resolver, get_profile_store
from ..domain.matching.resolver import MatchResolver
from ..domain.profiles.models import Profile
from ..domain.profiles.ports import ProfileStore
from ..profiles.schemas import ProfileResponse

router = APIRouter(prefix="/matches", tags=["Matches"])


@router.get("", response_model=List[ProfileResponse])
def list_matches(
    current_profile: Profile = Depends(get_current_profile),
    resolver: MatchResolver = Depends(get_match_resolver),
    profiles: ProfileStore = Depends(get_profile_store),
):
    """Profiles the caller shares a mutual interest with, ordered by name."""
    match_ids = resolver.resolve_matches(current_profile.id)
    return [ProfileResponse.model_validate(profile) for profile in profiles.find_many(match_ids)]
