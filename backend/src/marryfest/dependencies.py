"""Global FastAPI dependencies wiring the matching core to its adapters.

Every request gets one SQLAlchemy session (FastAPI caches get_db per
request), shared by the profile store and the interest repository. The
notification transport is built once per process and injected into the
ledger, so tests can override get_notifier with a fake.
"""

from functools import lru_cache

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from .auth.dependencies import get_current_identity
from .config import get_settings
from .database import get_db
from .domain.interests.ledger import InterestLedger
from .domain.interests.ports import InterestRepository
from .domain.matching.compatibility import CompatibilityFilter
from .domain.matching.resolver import MatchResolver
from .domain.notifications.ports import NotificationPort
from .domain.profiles.models import Profile
from .domain.profiles.ports import ProfileStore
from .infrastructure.notifications.mailjet_notifier import MailjetNotifier
from .infrastructure.repositories.interest_repository import SqlAlchemyInterestRepository
from .infrastructure.repositories.profile_repository import SqlAlchemyProfileStore


def get_profile_store(db: Session = Depends(get_db)) -> ProfileStore:
    return SqlAlchemyProfileStore(db)


def get_interest_repository(db: Session = Depends(get_db)) -> InterestRepository:
    return SqlAlchemyInterestRepository(db)


@lru_cache()
def get_notifier() -> NotificationPort:
    """Process-wide Mailjet notifier built from settings."""
    settings = get_settings()
    return MailjetNotifier(
        api_key=settings.MAILJET_API_KEY,
        secret_key=settings.MAILJET_SECRET_KEY,
        sender_email=settings.COMPANY_EMAIL,
        sender_name=settings.COMPANY_NAME,
        api_url=settings.MAILJET_API_URL,
        timeout=settings.NOTIFICATION_TIMEOUT_SECONDS,
    )


@lru_cache()
def get_compatibility_filter() -> CompatibilityFilter:
    return CompatibilityFilter()


def get_interest_ledger(
    profiles: ProfileStore = Depends(get_profile_store),
    interests: InterestRepository = Depends(get_interest_repository),
    notifier: NotificationPort = Depends(get_notifier),
) -> InterestLedger:
    return InterestLedger(profiles=profiles, interests=interests, notifier=notifier)


def get_match_resolver(
    interests: InterestRepository = Depends(get_interest_repository),
) -> MatchResolver:
    return MatchResolver(interests)


def get_current_profile(
    identity: str = Depends(get_current_identity),
    profiles: ProfileStore = Depends(get_profile_store),
) -> Profile:
    """Load the caller's own profile.

    Raises:
        HTTPException 404: If the verified identity has not created a profile yet
    """
    profile = profiles.find_by_identity(identity)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found",
        )
    return profile
