"""Interest repository for database operations"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import and_, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...domain.errors import DuplicateInterestError
from ...domain.interests.models import InterestRecord
from ...domain.interests.ports import InterestRepository
from ...models.interest import Interest as InterestModel


def _to_domain(row: InterestModel) -> InterestRecord:
    return InterestRecord(
        id=row.id,
        from_profile_id=row.from_profile_id,
        to_profile_id=row.to_profile_id,
        mutual=row.mutual,
        created_at=row.created_at,
        mutual_at=row.mutual_at,
    )


class SqlAlchemyInterestRepository(InterestRepository):
    """Repository for interest table operations.

    The unique constraint uq_interest_from_to backs the duplicate check:
    a concurrent insert for the same ordered pair fails at flush and is
    reported as DuplicateInterestError.
    """

    def __init__(self, db: Session):
        """Initialize repository with database session.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def get(self, from_profile_id: UUID, to_profile_id: UUID) -> Optional[InterestRecord]:
        query = (
            select(InterestModel)
            .where(
                and_(
                    InterestModel.from_profile_id == from_profile_id,
                    InterestModel.to_profile_id == to_profile_id,
                )
            )
            .execution_options(populate_existing=True)
        )
        row = self.db.execute(query).scalar_one_or_none()
        return _to_domain(row) if row else None

    def add(self, record: InterestRecord) -> InterestRecord:
        """Stage an interest record and flush it.

        Args:
            record: Domain record to persist

        Returns:
            Record with id populated

        Raises:
            DuplicateInterestError: If the ordered pair already has a record
        """
        row = InterestModel(
            from_profile_id=record.from_profile_id,
            to_profile_id=record.to_profile_id,
            mutual=record.mutual,
            created_at=record.created_at,
            mutual_at=record.mutual_at,
        )
        self.db.add(row)
        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateInterestError(record.from_profile_id, record.to_profile_id) from e

        return _to_domain(row)

    def mark_mutual(
        self,
        from_profile_id: UUID,
        to_profile_id: UUID,
        at: datetime
    ) -> Optional[InterestRecord]:
        """Flip a pending interest to mutual with a single conditional UPDATE.

        Concurrent accepts race on the WHERE mutual = false condition, so
        only the first one writes mutual_at.
        """
        self.db.execute(
            update(InterestModel)
            .where(
                and_(
                    InterestModel.from_profile_id == from_profile_id,
                    InterestModel.to_profile_id == to_profile_id,
                    InterestModel.mutual.is_(False),
                )
            )
            .values(mutual=True, mutual_at=at)
            .execution_options(synchronize_session=False)
        )
        return self.get(from_profile_id, to_profile_id)

    def list_received(self, profile_id: UUID) -> list[InterestRecord]:
        query = (
            select(InterestModel)
            .where(InterestModel.to_profile_id == profile_id)
            .order_by(InterestModel.created_at.desc())
        )
        return [_to_domain(row) for row in self.db.execute(query).scalars().all()]

    def list_mutual_for(self, profile_id: UUID) -> list[InterestRecord]:
        query = select(InterestModel).where(
            and_(
                InterestModel.mutual.is_(True),
                or_(
                    InterestModel.from_profile_id == profile_id,
                    InterestModel.to_profile_id == profile_id,
                ),
            )
        )
        return [_to_domain(row) for row in self.db.execute(query).scalars().all()]

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
