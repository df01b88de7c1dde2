"""Pytest configuration and fixtures."""

import os

# Settings are read once and cached, so the test environment must be in
# place before anything from cinetheque is imported.
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["COOKIE_SECURE"] = "false"
os.environ["OAUTH_CLIENT_ID"] = "cinetheque-test"
os.environ["OAUTH_CLIENT_SECRET"] = "cinetheque-test-secret"
os.environ["OAUTH_AUTHORIZATION_URL"] = "https://idp.example.com/authorize"
os.environ["OAUTH_TOKEN_URL"] = "https://idp.example.com/token"
os.environ["OAUTH_USERINFO_URL"] = "https://idp.example.com/userinfo"

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from cinetheque import models  # noqa: E402, F401
from cinetheque.application.common.unit_of_work import UnitOfWork  # noqa: E402
from cinetheque.database import Base, get_db  # noqa: E402
from cinetheque.domain.identity.principal import Principal  # noqa: E402
from cinetheque.infrastructure.identity.auth.token_service import (  # noqa: E402
    create_session_token,
)
from cinetheque.infrastructure.identity.routers.auth import limiter  # noqa: E402
from cinetheque.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine; StaticPool keeps the single in-memory database alive
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

ADMIN = Principal(
    subject="admin-1",
    name="Ada Admin",
    email="ada@example.com",
    authorities=frozenset({"admin"}),
)
VIEWER = Principal(subject="viewer-1", name="Victor Viewer", email="victor@example.com")


class FakeUnitOfWork(UnitOfWork):
    """In-memory unit of work recording how each scope ended."""

    def __init__(self) -> None:
        self.depth = 0
        self.commits = 0
        self.rollbacks = 0
        self.rollback_only = False

    def begin(self) -> None:
        self.depth += 1

    def commit(self) -> None:
        self.depth -= 1
        if self.depth == 0:
            if self.rollback_only:
                self.rollbacks += 1
            else:
                self.commits += 1
            self.rollback_only = False

    def rollback(self) -> None:
        self.depth -= 1
        if self.depth == 0:
            self.rollbacks += 1
            self.rollback_only = False
        else:
            self.rollback_only = True

    def mark_rollback_only(self) -> None:
        self.rollback_only = True


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


def _client_for(db_session: Session, **kwargs: Any) -> Generator[TestClient, Any, None]:
    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    limiter.reset()

    with TestClient(app, **kwargs) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def admin_token() -> str:
    """Session token of a principal holding the admin authority."""
    return create_session_token(ADMIN)


@pytest.fixture
def viewer_token() -> str:
    """Session token of a principal without any authority."""
    return create_session_token(VIEWER)


@pytest.fixture
def client(db_session: Session, admin_token: str) -> Generator[TestClient, Any, None]:
    """Create a test client authenticated as an admin."""
    yield from _client_for(db_session, headers={"Authorization": f"Bearer {admin_token}"})


@pytest.fixture
def viewer_client(db_session: Session, viewer_token: str) -> Generator[TestClient, Any, None]:
    """Create a test client authenticated without the admin authority."""
    yield from _client_for(db_session, headers={"Authorization": f"Bearer {viewer_token}"})


@pytest.fixture
def anonymous_client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client without any credential."""
    yield from _client_for(db_session)


@pytest.fixture
def unraising_client(db_session: Session, admin_token: str) -> Generator[TestClient, Any, None]:
    """Admin client that returns 500 responses instead of re-raising server errors."""
    yield from _client_for(
        db_session,
        raise_server_exceptions=False,
        headers={"Authorization": f"Bearer {admin_token}"},
    )


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def tarantino_payload() -> dict[str, Any]:
    return {
        "id": None,
        "firstName": "Quentin",
        "lastName": "Tarantino",
        "birthDate": "27/03/1963",
        "oscarCount": 2,
        "moviesRecord": None,
    }


@pytest.fixture
def pulp_fiction_payload() -> dict[str, Any]:
    return {
        "title": "Pulp Fiction",
        "releaseDate": "15/04/1998:12:12",
        "genre": "THRILLER",
        "rating": 9.5,
        "directorId": None,
    }
