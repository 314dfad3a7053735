"""
Pytest will auto-discover / import this file called 'conftest.py'. ]
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.api.app import create_app
from src.core.config import Settings
from src.db.database import enforce_sqlite_foreign_keys, get_db
from src.db.schema import Base

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enforce_sqlite_foreign_keys(engine)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)

TEST_SETTINGS = Settings(
    DB_SOURCE=DATABASE_URL,
    JWT_SECRET_KEY="test-secret-key-that-is-long-enough-for-hs256",
    LOG_LEVEL="WARNING",
    _env_file=None,
)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def test_settings() -> Settings:
    return TEST_SETTINGS


@pytest.fixture
def app(db_session_repo: Session) -> FastAPI:
    """API wired to the in-memory database: every request shares the test session."""
    application = create_app(TEST_SETTINGS)

    def override_get_db() -> Generator[Session, None, None]:
        yield db_session_repo

    application.dependency_overrides[get_db] = override_get_db
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def session_factory(db_session_repo: Session) -> sessionmaker:
    """Factory handing out sessions on the same in-memory database (tables already created)."""
    return TestingSessionLocal
