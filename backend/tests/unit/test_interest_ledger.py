"""Unit tests for InterestLedger express/accept flows.

Uses the in-memory port fakes so the notification coupling (commit only
after a successful send) can be observed directly.
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from marryfest.domain.errors import (
    DuplicateInterestError,
    InterestNotFoundError,
    InvalidInputError,
    NotificationDeliveryError,
    NotificationFailedError,
    ProfileNotFoundError,
)
from marryfest.domain.interests import InterestLedger, InterestStatus
from marryfest.domain.profiles import Gender, Height

from fixtures.fakes import FakeNotifier
from fixtures.profiles import make_profile

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def alice(profile_store):
    return profile_store.save(make_profile("alice@example.com", Gender.FEMALE, 27, Height(5, 4)))


@pytest.fixture
def bob(profile_store):
    return profile_store.save(make_profile(
        "bob@example.com", Gender.MALE, 30, Height(5, 10), last_name="Kumar", religion="Jain"
    ))


@pytest.fixture
def ledger(profile_store, interest_repository, fake_notifier):
    return InterestLedger(profile_store, interest_repository, fake_notifier, clock=lambda: NOW)


class TestExpressInterest:

    def test_creates_pending_record_and_notifies(self, ledger, interest_repository, fake_notifier, alice, bob):
        record = ledger.express_interest(bob.id, alice.id)

        assert record.from_profile_id == bob.id
        assert record.to_profile_id == alice.id
        assert record.mutual is False
        assert record.status == InterestStatus.PENDING
        assert record.created_at == NOW
        assert interest_repository.commits == 1
        assert (bob.id, alice.id) in interest_repository.committed

        [notification] = fake_notifier.sent
        assert notification.recipient_email == "alice@example.com"
        assert notification.recipient_name == "Alice"
        assert notification.sender_first_name == "Bob"
        assert notification.sender_last_name == "Kumar"
        assert notification.sender_religion == "Jain"
        assert notification.sender_height_feet == 5
        assert notification.sender_height_inches == 10

    def test_duplicate_is_rejected_without_second_notification(self, ledger, fake_notifier, alice, bob):
        ledger.express_interest(bob.id, alice.id)

        with pytest.raises(DuplicateInterestError):
            ledger.express_interest(bob.id, alice.id)

        assert len(fake_notifier.sent) == 1

    def test_reverse_direction_is_a_separate_record(self, ledger, interest_repository, alice, bob):
        ledger.express_interest(bob.id, alice.id)
        ledger.express_interest(alice.id, bob.id)

        assert len(interest_repository.committed) == 2

    def test_notification_failure_persists_nothing(self, profile_store, interest_repository, alice, bob):
        notifier = FakeNotifier(status="error")
        ledger = InterestLedger(profile_store, interest_repository, notifier, clock=lambda: NOW)

        with pytest.raises(NotificationFailedError) as exc_info:
            ledger.express_interest(bob.id, alice.id)

        assert exc_info.value.status == "error"
        assert interest_repository.committed == {}
        assert interest_repository.staged == {}
        assert interest_repository.rollbacks == 1
        assert ledger.get_interest(bob.id, alice.id) is None

    def test_retry_after_failed_notification_succeeds(self, profile_store, interest_repository, alice, bob):
        notifier = FakeNotifier(status="error")
        ledger = InterestLedger(profile_store, interest_repository, notifier, clock=lambda: NOW)
        with pytest.raises(NotificationFailedError):
            ledger.express_interest(bob.id, alice.id)

        notifier.status = "success"
        record = ledger.express_interest(bob.id, alice.id)

        assert record.status == InterestStatus.PENDING

    def test_transport_error_rolls_back_and_propagates(self, profile_store, interest_repository, alice, bob):
        notifier = FakeNotifier(error=NotificationDeliveryError("timed out"))
        ledger = InterestLedger(profile_store, interest_repository, notifier, clock=lambda: NOW)

        with pytest.raises(NotificationDeliveryError):
            ledger.express_interest(bob.id, alice.id)

        assert interest_repository.committed == {}
        assert interest_repository.rollbacks == 1

    def test_self_interest_rejected(self, ledger, fake_notifier, bob):
        with pytest.raises(InvalidInputError):
            ledger.express_interest(bob.id, bob.id)

        assert fake_notifier.sent == []

    def test_unknown_sender(self, ledger, fake_notifier, alice):
        with pytest.raises(ProfileNotFoundError):
            ledger.express_interest(uuid4(), alice.id)

        assert fake_notifier.sent == []

    def test_unknown_recipient(self, ledger, fake_notifier, bob):
        missing = uuid4()

        with pytest.raises(ProfileNotFoundError) as exc_info:
            ledger.express_interest(bob.id, missing)

        assert exc_info.value.reference == missing
        assert fake_notifier.sent == []


class TestAcceptInterest:

    def test_accept_marks_mutual(self, ledger, alice, bob):
        ledger.express_interest(bob.id, alice.id)

        record = ledger.accept_interest(alice.id, bob.id)

        assert record.mutual is True
        assert record.status == InterestStatus.MUTUAL
        assert record.mutual_at == NOW
        assert ledger.get_interest(bob.id, alice.id).mutual is True

    def test_accept_is_idempotent(self, ledger, interest_repository, alice, bob):
        ledger.express_interest(bob.id, alice.id)
        ledger.accept_interest(alice.id, bob.id)
        commits = interest_repository.commits

        record = ledger.accept_interest(alice.id, bob.id)

        assert record.mutual is True
        assert interest_repository.commits == commits

    def test_accept_wrong_direction_not_found(self, ledger, alice, bob):
        ledger.express_interest(bob.id, alice.id)

        # Bob never received interest from Alice
        with pytest.raises(InterestNotFoundError):
            ledger.accept_interest(bob.id, alice.id)

        assert ledger.get_interest(bob.id, alice.id).mutual is False

    def test_accept_without_interest(self, ledger, alice, bob):
        with pytest.raises(InterestNotFoundError):
            ledger.accept_interest(alice.id, bob.id)

    def test_accept_does_not_notify(self, ledger, fake_notifier, alice, bob):
        ledger.express_interest(bob.id, alice.id)
        ledger.accept_interest(alice.id, bob.id)

        assert len(fake_notifier.sent) == 1


class TestReceivedInterests:

    def test_lists_only_incoming(self, ledger, profile_store, alice, bob):
        carol = profile_store.save(make_profile("carol@example.com", Gender.MALE, 29, Height(5, 9)))
        ledger.express_interest(bob.id, alice.id)
        ledger.express_interest(carol.id, alice.id)
        ledger.express_interest(alice.id, bob.id)

        received = ledger.received_interests(alice.id)

        assert {r.from_profile_id for r in received} == {bob.id, carol.id}
        assert all(r.to_profile_id == alice.id for r in received)
