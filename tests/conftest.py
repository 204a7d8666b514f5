"""
Shared fixtures for the ScrapCart API test suite.

The application reads its settings at import time, so the environment is
pointed at a throwaway SQLite database before anything from ``app`` is
imported.
"""

import os
import tempfile

_TEST_DIR = tempfile.mkdtemp(prefix="scrapcart-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TEST_DIR, 'scrapcart_test.db')}"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["AI_GATEWAY_API_KEY"] = "test-ai-gateway-key"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import Callable, Dict, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.database import Base, SessionLocal, engine
from app.main import app
from app.models.profile import Profile
from app.models.user import User
from app.routers.auth import create_access_token, get_password_hash
from app.services.pricing_service import seed_scrap_rates

TEST_PASSWORD = "correct-horse-battery"

# Hashing is deliberately slow; do it once for every user the fixtures create
_TEST_PASSWORD_HASH = get_password_hash(TEST_PASSWORD)


# ============================================================================
# Database
# ============================================================================

@pytest.fixture(autouse=True)
def reset_database() -> Iterator[None]:
    """Give every test empty tables with the default scrap rates."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    with SessionLocal() as db:
        seed_scrap_rates(db)
    yield


@pytest.fixture
def db_session() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ============================================================================
# HTTP client and users
# ============================================================================

@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_user(db_session: Session) -> Callable[..., User]:
    """Insert a user (with profile) directly, bypassing the sign-up endpoint."""
    counter = {"n": 0}

    def _make_user(email: str = None, display_name: str = None) -> User:
        counter["n"] += 1
        email = email or f"user{counter['n']}@example.com"
        user = User(email=email, username=email.split("@")[0], password=_TEST_PASSWORD_HASH)
        user.profile = Profile(display_name=display_name or user.username)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def user(make_user: Callable[..., User]) -> User:
    return make_user(email="asha@example.com", display_name="Asha")


@pytest.fixture
def auth_headers(user: User) -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.user_id)}"}


@pytest.fixture
def headers_for() -> Callable[[User], Dict[str, str]]:
    def _headers_for(some_user: User) -> Dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(some_user.user_id)}"}

    return _headers_for
