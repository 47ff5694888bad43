"""Profile repository - SQLAlchemy implementation of the ProfileStore port."""

from datetime import date
from typing import Iterable, Optional
from uuid import UUID

from sqlalchemy import and_, false, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...domain.errors import DuplicateProfileError
from ...domain.profiles.models import Gender, Height, Profile, normalize_identity
from ...domain.profiles.ports import ProfileStore
from ...domain.profiles.predicate import (
    AgeBound,
    AgeDirection,
    CandidatePredicate,
    HeightBound,
    HeightDirection,
)
from ...models.profile import Profile as ProfileModel


def _to_domain(row: ProfileModel) -> Profile:
    return Profile(
        id=row.id,
        email=row.email,
        first_name=row.first_name,
        last_name=row.last_name,
        gender=Gender(row.gender) if row.gender else None,
        dob=row.dob,
        height=Height(feet=row.height_feet, inches=row.height_inches or 0)
        if row.height_feet is not None else None,
        religion=row.religion,
        community=row.community,
        community_preference=row.community_preference,
        marital_status=row.marital_status,
        city=row.city,
        state=row.state,
        country=row.country,
        contact=row.contact,
        time_of_birth=row.time_of_birth,
        place_of_birth=row.place_of_birth,
    )


def _height_clause(bound: HeightBound):
    """Lexicographic (feet, inches) comparison against the bound's reference."""
    feet = bound.reference.feet
    inches = bound.reference.inches
    if bound.direction == HeightDirection.SHORTER:
        return or_(
            ProfileModel.height_feet < feet,
            and_(ProfileModel.height_feet == feet, ProfileModel.height_inches < inches),
        )
    return or_(
        ProfileModel.height_feet > feet,
        and_(ProfileModel.height_feet == feet, ProfileModel.height_inches > inches),
    )


def _age_clause(bound: AgeBound):
    """Calendar-year age bound expressed on the birth date column.

    age <= N  <=>  birth year >= today.year - N
    age >= N  <=>  birth year <= today.year - N
    """
    birth_year = bound.reference_birth_year
    if bound.direction == AgeDirection.YOUNGER_OR_EQUAL:
        return ProfileModel.dob >= date(birth_year, 1, 1)
    return ProfileModel.dob < date(birth_year + 1, 1, 1)


def build_candidate_filter(predicate: CandidatePredicate) -> list:
    """Translate a CandidatePredicate into SQLAlchemy WHERE clauses.

    Args:
        predicate: Predicate derived for a seeker

    Returns:
        List of clauses to AND together
    """
    if not predicate.is_satisfiable:
        return [false()]

    clauses = [
        ProfileModel.gender != predicate.exclude_gender.value,
        ProfileModel.community_preference == predicate.community_preference,
    ]
    if predicate.height_bound is not None:
        clauses.append(_height_clause(predicate.height_bound))
    if predicate.age_bound is not None:
        clauses.append(_age_clause(predicate.age_bound))
    return clauses


class SqlAlchemyProfileStore(ProfileStore):
    """Profile persistence backed by the profile table.

    save() only flushes; the caller owns the transaction and commits.
    """

    def __init__(self, db: Session):
        """Initialize repository with database session.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def find_by_identity(self, email: str) -> Optional[Profile]:
        query = select(ProfileModel).where(ProfileModel.email == normalize_identity(email))
        row = self.db.execute(query).scalar_one_or_none()
        return _to_domain(row) if row else None

    def find_by_id(self, profile_id: UUID) -> Optional[Profile]:
        row = self.db.get(ProfileModel, profile_id)
        return _to_domain(row) if row else None

    def find_many(self, profile_ids: Iterable[UUID]) -> list[Profile]:
        ids = list(profile_ids)
        if not ids:
            return []
        query = (
            select(ProfileModel)
            .where(ProfileModel.id.in_(ids))
            .order_by(ProfileModel.first_name, ProfileModel.last_name)
        )
        return [_to_domain(row) for row in self.db.execute(query).scalars().all()]

    def query(self, predicate: CandidatePredicate) -> list[Profile]:
        query = (
            select(ProfileModel)
            .where(*build_candidate_filter(predicate))
            .order_by(ProfileModel.created_at)
        )
        return [_to_domain(row) for row in self.db.execute(query).scalars().all()]

    def save(self, profile: Profile) -> Profile:
        """Insert a new profile.

        Args:
            profile: Domain profile (id is assigned if missing)

        Returns:
            The stored profile with its id

        Raises:
            DuplicateProfileError: If the email already owns a profile
        """
        email = normalize_identity(profile.email)
        if self.find_by_identity(email) is not None:
            raise DuplicateProfileError(email)

        row = ProfileModel(
            email=email,
            first_name=profile.first_name,
            last_name=profile.last_name,
            gender=profile.gender.value if profile.gender else None,
            dob=profile.dob,
            height_feet=profile.height.feet if profile.height else None,
            height_inches=profile.height.inches if profile.height else None,
            religion=profile.religion,
            community=profile.community,
            community_preference=profile.community_preference,
            marital_status=profile.marital_status,
            city=profile.city,
            state=profile.state,
            country=profile.country,
            contact=profile.contact,
            time_of_birth=profile.time_of_birth,
            place_of_birth=profile.place_of_birth,
        )
        if profile.id is not None:
            row.id = profile.id

        self.db.add(row)
        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateProfileError(email) from e

        return _to_domain(row)
