# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up test environment variables before any imports
# - Every app/service fixture gets its own in-memory SQLite database
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.main builds a module-level app from environment settings on import

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from core.services.example_model_service import ExampleModelService
from lib.database import create_db_engine, create_session_factory, init_database


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """Settings pointing at a private in-memory database."""
    return Settings(_env_file=None, DATABASE_URL="sqlite://", ENVIRONMENT="development")


@pytest.fixture
def app(settings):
    """Fresh application instance."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client with the lifespan (schema creation) running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def engine():
    """In-memory engine with the schema created."""
    engine = create_db_engine("sqlite://")
    init_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """A single session, closed after the test."""
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def service(db_session):
    """ExampleModelService bound to the test session."""
    return ExampleModelService(db_session)


@pytest.fixture
def sample_model_data():
    """Sample ExampleModel fields for testing."""
    return {
        "name": "Widget",
        "description": "A small widget",
        "quantity": 3,
    }
