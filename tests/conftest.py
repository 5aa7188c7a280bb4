"""Shared fixtures: in-memory SQLite database, users and an API client."""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ["SQLALCHEMY_DATABASE_URI"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.api.dependencies import get_current_user
from app.autoregulation import DeloadPolicy
from app.db import base  # noqa: F401
from app.db.session import get_db
from app.models.user import User


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


def _make_user(session: Session, email: str) -> User:
    # Service tests never log in, so the hash is never checked
    user = User(email=email, hashed_password="not-a-real-hash", full_name="Test Lifter")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def user(session):
    return _make_user(session, "lifter@example.com")


@pytest.fixture
def other_user(session):
    return _make_user(session, "someone.else@example.com")


@pytest.fixture
def no_deload():
    return DeloadPolicy(enabled=False)


@pytest.fixture
def app_client(session):
    """TestClient bound to the test database, with real authentication."""
    from app.main import app

    def _get_db():
        yield session

    app.dependency_overrides[get_db] = _get_db
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def client(app_client, user):
    """TestClient authenticated as :func:`user`."""
    from app.main import app

    app.dependency_overrides[get_current_user] = lambda: user
    return app_client
