"""Pytest fixtures for service and API tests."""

import os
from collections.abc import AsyncGenerator, Generator
from datetime import datetime, timedelta, timezone

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite:///langbuddy-test.db")

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from langbuddy.api.deps import get_db
from langbuddy.db import models  # noqa: F401  # Imported for side effects
from langbuddy.db.base import Base
from langbuddy.db.models import User
from langbuddy.main import create_app


class SequentialIds:
    """Deterministic id source: ``<prefix>-0001``, ``<prefix>-0002``, ..."""

    def __init__(self, prefix: str = "id") -> None:
        self.prefix = prefix
        self.issued = 0

    def __call__(self) -> str:
        self.issued += 1
        return f"{self.prefix}-{self.issued:04d}"


class SteppingClock:
    """Clock that moves forward one second per reading."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


@pytest.fixture(scope="session")
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session(db_engine) -> Generator[Session, None, None]:
    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=db_engine, expire_on_commit=False
    )
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        for table in reversed(Base.metadata.sorted_tables):
            db.execute(table.delete())
        db.commit()
        db.close()


@pytest.fixture()
def client(db_session: Session) -> Generator[TestClient, None, None]:
    app = create_app()

    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture()
async def async_client(db_session: Session) -> AsyncGenerator[httpx.AsyncClient, None]:
    app = create_app()

    async def override_get_db() -> AsyncGenerator[Session, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


def register_and_login(client: TestClient, email: str, password: str = "verysecure") -> dict[str, str]:
    """Register ``email`` and return Authorization headers for it."""

    client.post("/api/v1/auth/register", json={"email": email, "password": password})
    login_response = client.post(
        "/api/v1/auth/login", json={"email": email, "password": password}
    )
    token = login_response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def auth_headers(client: TestClient) -> dict[str, str]:
    return register_and_login(client, "learner@example.com")


@pytest.fixture()
def other_auth_headers(client: TestClient) -> dict[str, str]:
    return register_and_login(client, "someone.else@example.com")


@pytest.fixture()
def learner(db_session: Session) -> User:
    user = User(email="store-owner@example.com", hashed_password="x", is_active=True)
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture()
def other_learner(db_session: Session) -> User:
    user = User(email="store-stranger@example.com", hashed_password="x", is_active=True)
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture()
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture()
def clock() -> SteppingClock:
    return SteppingClock()
