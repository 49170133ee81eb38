# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# - Points the app at an in-memory SQLite database before any imports
# - Provides a fresh database per test, a session and an API client
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# student_registry.config builds its settings at import time

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from student_registry.database.base import Base
from student_registry.database import models  # noqa: F401
from student_registry.database.session import get_db
from student_registry.main import app


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def engine():
    """In-memory database shared by every connection of one test."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    """TestClient whose requests use the test database."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def student_payload():
    """Sample POST /students body."""
    return {
        "firstName": "Izzy",
        "lastName": "DevG",
        "email": "fake@email.com",
        "schoolId": 1,
    }
