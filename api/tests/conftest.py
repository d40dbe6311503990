"""Shared pytest fixtures for test suite"""
import os

# Settings require a database URL at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from typing import Callable, Generator, List, Optional
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session, create_engine
from sqlalchemy.pool import StaticPool

from conceptmemo.main import app
from conceptmemo.core.database import get_session
from conceptmemo.models import Concept, Word


# SQLite in-memory database for testing
TEST_DATABASE_URL = "sqlite://"

# Create test engine with StaticPool for in-memory database
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

USER_A = "user-a"
USER_B = "user-b"


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """Create a fresh SQLite in-memory database session for each test"""
    SQLModel.metadata.create_all(test_engine)

    with Session(test_engine) as session:
        try:
            yield session
        finally:
            session.close()
            SQLModel.metadata.drop_all(test_engine)


@pytest.fixture(scope="function")
def make_concept(db_session: Session) -> Callable[..., Concept]:
    """Factory persisting a concept with words directly, bypassing the services"""
    def _make_concept(
        user_id: str,
        name: Optional[str] = None,
        notes: Optional[str] = None,
        words: Optional[List[str]] = None,
    ) -> Concept:
        concept = Concept(user_id=user_id, name=name, notes=notes)
        concept.words = [Word(word=word) for word in (words or [])]
        db_session.add(concept)
        db_session.commit()
        db_session.refresh(concept)
        return concept

    return _make_concept


@pytest.fixture(scope="function")
def make_client(db_session: Session) -> Generator[Callable[..., TestClient], None, None]:
    """Factory for FastAPI test clients bound to the test database, optionally carrying a session cookie"""

    def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    clients = []

    def _make_client(user_id: Optional[str] = None) -> TestClient:
        cookies = {"user_id": user_id} if user_id else None
        test_client = TestClient(app, cookies=cookies)
        clients.append(test_client)
        return test_client

    try:
        yield _make_client
    finally:
        for test_client in clients:
            test_client.close()
        app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client_a(make_client) -> TestClient:
    """Client whose session cookie identifies USER_A"""
    return make_client(USER_A)


@pytest.fixture(scope="function")
def client_b(make_client) -> TestClient:
    """Client whose session cookie identifies USER_B"""
    return make_client(USER_B)
