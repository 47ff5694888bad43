"""Integration tests for the SQLAlchemy profile store and interest repository.

Runs against an in-memory SQLite database; the SQL candidate filter must
agree with the in-memory CandidatePredicate.
"""

from datetime import date, datetime, timezone
from uuid import uuid4

import pytest

from marryfest.domain.errors import DuplicateInterestError, DuplicateProfileError
from marryfest.domain.interests import InterestLedger, InterestRecord
from marryfest.domain.matching import CompatibilityFilter, MatchResolver
from marryfest.domain.profiles import Gender, Height
from marryfest.infrastructure.repositories import (
    SqlAlchemyInterestRepository,
    SqlAlchemyProfileStore,
)

from fixtures.profiles import TODAY, make_profile

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def store(db_session):
    return SqlAlchemyProfileStore(db_session)


@pytest.fixture
def interests(db_session):
    return SqlAlchemyInterestRepository(db_session)


class TestProfileStore:

    def test_save_and_find(self, store, db_session):
        saved = store.save(make_profile("Alice@Example.com ", Gender.FEMALE, 27, Height(5, 4)))
        db_session.commit()

        assert saved.id is not None
        assert saved.email == "alice@example.com"
        assert saved.height == Height(5, 4)
        assert store.find_by_identity("ALICE@example.com").id == saved.id
        assert store.find_by_id(saved.id).first_name == "Alice"
        assert store.find_by_id(uuid4()) is None
        assert store.find_by_identity("nobody@example.com") is None

    def test_duplicate_identity_rejected(self, store, db_session):
        store.save(make_profile("alice@example.com", Gender.FEMALE, 27, Height(5, 4)))
        db_session.commit()

        with pytest.raises(DuplicateProfileError):
            store.save(make_profile("ALICE@example.com", Gender.FEMALE, 28, Height(5, 5)))

    def test_find_many_orders_by_name(self, profile_factory, store):
        zoe = profile_factory("zoe@example.com", Gender.FEMALE, 27, Height(5, 4))
        amy = profile_factory("amy@example.com", Gender.FEMALE, 27, Height(5, 4))

        assert [p.id for p in store.find_many([zoe.id, amy.id])] == [amy.id, zoe.id]
        assert store.find_many([]) == []


class TestCandidateQuery:

    def test_concrete_pair(self, profile_factory, store):
        a = profile_factory("a@example.com", Gender.MALE, 30, Height(5, 10))
        b = profile_factory("b@example.com", Gender.FEMALE, 27, Height(5, 4))
        compatibility = CompatibilityFilter()

        assert [p.id for p in store.query(compatibility.derive_predicate(a, TODAY))] == [b.id]
        assert [p.id for p in store.query(compatibility.derive_predicate(b, TODAY))] == [a.id]

    def test_sql_filter_agrees_with_predicate(self, profile_factory, store):
        seeker = profile_factory("seeker@example.com", Gender.MALE, 30, Height(5, 10))
        population = [
            profile_factory("p1@example.com", Gender.FEMALE, 27, Height(5, 4)),
            profile_factory("p2@example.com", Gender.FEMALE, 30, Height(5, 9)),
            profile_factory("p3@example.com", Gender.FEMALE, 31, Height(5, 4)),
            profile_factory("p4@example.com", Gender.FEMALE, 25, Height(5, 10)),
            profile_factory("p5@example.com", Gender.FEMALE, 25, Height(5, 11)),
            profile_factory("p6@example.com", Gender.FEMALE, 25, Height(4, 11)),
            profile_factory("p7@example.com", Gender.FEMALE, 25, Height(5, 2), community_preference="Y"),
            profile_factory("p8@example.com", Gender.MALE, 25, Height(5, 2)),
            profile_factory("p9@example.com", Gender.FEMALE, 30, Height(5, 2), dob=date(1996, 12, 31)),
            profile_factory("p10@example.com", Gender.FEMALE, 31, Height(5, 2), dob=date(1995, 12, 31)),
        ]
        predicate = CompatibilityFilter().derive_predicate(seeker, TODAY)

        expected = {p.id for p in population if predicate.matches(p)}
        assert {p.id for p in store.query(predicate)} == expected
        assert {p.email for p in store.query(predicate)} == {
            "p1@example.com", "p2@example.com", "p6@example.com", "p9@example.com",
        }

    def test_female_seeker_birth_year_boundary(self, profile_factory, store):
        seeker = profile_factory("seeker@example.com", Gender.FEMALE, 27, Height(5, 4))
        same_year = profile_factory(
            "same@example.com", Gender.MALE, 27, Height(5, 10), dob=date(TODAY.year - 27, 12, 31)
        )
        profile_factory(
            "younger@example.com", Gender.MALE, 26, Height(5, 10), dob=date(TODAY.year - 26, 1, 1)
        )

        predicate = CompatibilityFilter().derive_predicate(seeker, TODAY)

        assert [p.id for p in store.query(predicate)] == [same_year.id]

    def test_no_preference_yields_nothing(self, profile_factory, store):
        seeker = profile_factory("a@example.com", Gender.MALE, 30, Height(5, 10), community_preference=None)
        profile_factory("b@example.com", Gender.FEMALE, 27, Height(5, 4), community_preference=None)

        assert store.query(CompatibilityFilter().derive_predicate(seeker, TODAY)) == []


class TestInterestRepository:

    def test_add_get_and_duplicate(self, profile_factory, interests):
        a = profile_factory("a@example.com", Gender.MALE, 30, Height(5, 10))
        b = profile_factory("b@example.com", Gender.FEMALE, 27, Height(5, 4))

        record = interests.add(InterestRecord(from_profile_id=a.id, to_profile_id=b.id, created_at=NOW))
        interests.commit()

        assert record.id is not None
        assert interests.get(a.id, b.id).mutual is False
        assert interests.get(b.id, a.id) is None

        with pytest.raises(DuplicateInterestError):
            interests.add(InterestRecord(from_profile_id=a.id, to_profile_id=b.id, created_at=NOW))

        assert interests.get(a.id, b.id) is not None

    def test_rollback_discards_staged_record(self, profile_factory, interests):
        a = profile_factory("a@example.com", Gender.MALE, 30, Height(5, 10))
        b = profile_factory("b@example.com", Gender.FEMALE, 27, Height(5, 4))

        interests.add(InterestRecord(from_profile_id=a.id, to_profile_id=b.id, created_at=NOW))
        interests.rollback()

        assert interests.get(a.id, b.id) is None

    def test_mark_mutual_only_once(self, profile_factory, interests):
        a = profile_factory("a@example.com", Gender.MALE, 30, Height(5, 10))
        b = profile_factory("b@example.com", Gender.FEMALE, 27, Height(5, 4))
        interests.add(InterestRecord(from_profile_id=a.id, to_profile_id=b.id, created_at=NOW))
        interests.commit()

        first = interests.mark_mutual(a.id, b.id, NOW)
        interests.commit()
        second = interests.mark_mutual(a.id, b.id, datetime(2027, 1, 1, tzinfo=timezone.utc))
        interests.commit()

        assert first.mutual is True
        assert second.mutual_at == first.mutual_at
        assert interests.mark_mutual(b.id, a.id, NOW) is None

    def test_list_mutual_and_received(self, profile_factory, interests):
        a = profile_factory("a@example.com", Gender.MALE, 30, Height(5, 10))
        b = profile_factory("b@example.com", Gender.FEMALE, 27, Height(5, 4))
        c = profile_factory("c@example.com", Gender.FEMALE, 26, Height(5, 2))
        interests.add(InterestRecord(from_profile_id=a.id, to_profile_id=b.id, created_at=NOW))
        interests.add(InterestRecord(from_profile_id=c.id, to_profile_id=a.id, created_at=NOW))
        interests.commit()
        interests.mark_mutual(a.id, b.id, NOW)
        interests.commit()

        assert [r.to_profile_id for r in interests.list_mutual_for(a.id)] == [b.id]
        assert [r.from_profile_id for r in interests.list_mutual_for(b.id)] == [a.id]
        assert interests.list_mutual_for(c.id) == []
        assert [r.from_profile_id for r in interests.list_received(a.id)] == [c.id]


def test_ledger_and_resolver_over_sql(profile_factory, store, interests, fake_notifier):
    a = profile_factory("a@example.com", Gender.MALE, 30, Height(5, 10))
    b = profile_factory("b@example.com", Gender.FEMALE, 27, Height(5, 4))
    ledger = InterestLedger(store, interests, fake_notifier, clock=lambda: NOW)
    resolver = MatchResolver(interests)

    ledger.express_interest(a.id, b.id)
    ledger.accept_interest(b.id, a.id)

    assert resolver.resolve_matches(a.id) == {b.id}
    assert resolver.resolve_matches(b.id) == {a.id}
