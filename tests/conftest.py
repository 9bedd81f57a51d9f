"""
Pytest fixtures for Records API tests.
"""

from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.deps import get_record_repo
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import FakeRecordRepository


# ---------------------------------------------------------------------------
# Mock Environment Variables
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Keep tests independent of the developer's environment."""
    for var in ("SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY", "SUPABASE_ANON_KEY", "RECORD_STORE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("ENVIRONMENT", "test")
    yield


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Test settings using the in-memory record store."""
    return Settings(environment="test", record_store="memory", _env_file=None)


@pytest.fixture
def app(test_settings) -> FastAPI:
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def fake_record_repo() -> FakeRecordRepository:
    """Create a fresh fake record repository."""
    return FakeRecordRepository()


@pytest.fixture
def client(app, fake_record_repo) -> Generator[TestClient, None, None]:
    """
    Per-test FastAPI TestClient wired to the fake record repository.
    Properly cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_record_repo] = lambda: fake_record_repo
    yield TestClient(app)
    app.dependency_overrides.clear()
