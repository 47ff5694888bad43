"""Pytest fixtures for the matching backend.

Provides reusable test fixtures for:
- SQLite in-memory database session (fresh schema per test)
- Profile factory for the SQLAlchemy profile store
- In-memory fakes of the ports (profile store, interest repository, notifier)
- FastAPI test client with database and notifier overrides
- Bearer tokens for verified identities

Usage:
    def test_candidates(client, auth_headers):
        response = client.get("/api/v1/profiles/candidates", headers=auth_headers("a@example.com"))
        assert response.status_code == 200
"""

import os

# Set environment variables BEFORE any imports to ensure they take effect
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-key-256-bits-minimum-length-required-for-security")
os.environ.setdefault("LOG_JSON", "false")

from datetime import date
from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from marryfest.auth.jwt import create_access_token
from marryfest.database import get_db
from marryfest.dependencies import get_notifier
from marryfest.domain.profiles.models import Profile
from marryfest.infrastructure.repositories.profile_repository import SqlAlchemyProfileStore
from marryfest.main import app
from marryfest.models.base import Base

from fixtures.fakes import FakeNotifier, InMemoryInterestRepository, InMemoryProfileStore
from fixtures.profiles import TODAY, make_profile


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture(scope="function")
def engine():
    """In-memory SQLite engine shared across threads (TestClient runs sync
    endpoints in a threadpool)."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    try:
        yield test_engine
    finally:
        Base.metadata.drop_all(bind=test_engine)
        test_engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session(session_factory) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def profile_factory(db_session: Session) -> Callable[..., Profile]:
    """Persist profiles through the SQLAlchemy store.

    Usage:
        alice = profile_factory("alice@example.com", Gender.FEMALE, 27, Height(5, 4))
    """
    store = SqlAlchemyProfileStore(db_session)

    def _create(email, gender, age, height, community_preference="X", today=TODAY, **fields):
        profile = store.save(make_profile(
            email, gender, age, height,
            community_preference=community_preference, today=today, **fields
        ))
        db_session.commit()
        return profile

    return _create


@pytest.fixture
def fake_notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def profile_store() -> InMemoryProfileStore:
    return InMemoryProfileStore()


@pytest.fixture
def interest_repository() -> InMemoryInterestRepository:
    return InMemoryInterestRepository()


@pytest.fixture(scope="function")
def client(session_factory, fake_notifier: FakeNotifier) -> Generator[TestClient, None, None]:
    """Test client bound to the in-memory database and the fake notifier."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_notifier] = lambda: fake_notifier

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> Callable[[str], dict]:
    """Build Authorization headers for a verified identity."""

    def _headers(email: str) -> dict:
        return {"Authorization": f"Bearer {create_access_token(email)}"}

    return _headers
