"""
Test configuration and fixtures for Cookify.

- Function-scoped in-memory SQLite engine (TEST_DATABASE_URL overrides)
- Session per test; tables are dropped after each test
- TestClient with database dependency override
- Mock Claude service patched into the image AI router
"""

import os
from typing import Generator

# Settings are read at import time; keep the app off the production database
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ANTHROPIC_API_KEY", "test-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from cookify.database import Base, get_db
from cookify.main import app
from cookify.models import Category, Recipe  # noqa: F401


# =============================================================================
# Database Fixtures
# =============================================================================


def get_test_database_url() -> str:
    """TEST_DATABASE_URL if set, otherwise a private in-memory SQLite database."""
    return os.environ.get("TEST_DATABASE_URL", "sqlite://")


@pytest.fixture
def test_engine():
    """
    Create a fresh engine with all tables for one test.

    In-memory SQLite needs StaticPool so every session sees the same
    connection (and therefore the same database).
    """
    database_url = get_test_database_url()

    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(database_url)

    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(test_engine) -> Generator[Session, None, None]:
    """
    Provide a database session for one test.

    Services commit freely; isolation comes from the per-test engine.
    """
    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=test_engine
    )
    session = TestingSessionLocal()

    yield session

    session.rollback()
    session.close()


# =============================================================================
# TestClient Fixtures
# =============================================================================


@pytest.fixture
def client(db: Session) -> Generator[TestClient, None, None]:
    """
    TestClient with database dependency override.

    The database session is injected into the app's get_db dependency.
    """

    def override_get_db():
        try:
            yield db
        finally:
            pass  # Don't close - managed by db fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_claude_service(monkeypatch):
    """
    Mock Claude service for testing AI endpoints.

    Returns a mock service that can be configured per test.
    """
    from tests.fixtures.mocks import MockClaudeService

    mock_service = MockClaudeService()

    # The router holds a module-level instance
    monkeypatch.setattr("cookify.api.image_ai.claude_service", mock_service)

    return mock_service


# =============================================================================
# pytest markers
# =============================================================================


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
