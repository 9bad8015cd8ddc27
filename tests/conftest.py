"""
Shared pytest fixtures for the E-Tracker API tests.

Provides a test-configured application, a fresh in-memory exercise
repository per test, and a TestClient with the repository dependency
overridden so no database is needed.

Usage:
    def test_something(client, fake_repo):
        fake_repo.seed([exercise_row(name="Run")])
        response = client.get("/api/exercises")
        assert response.status_code == 200
"""

from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.deps import get_exercise_repo
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import FakeExerciseRepository


@pytest.fixture
def test_settings() -> Settings:
    """Test settings that ignore any local .env file."""
    return Settings(environment="test", _env_file=None)


@pytest.fixture
def app(test_settings) -> FastAPI:
    """Create a test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def fake_repo() -> FakeExerciseRepository:
    """A fresh, empty FakeExerciseRepository."""
    return FakeExerciseRepository()


@pytest.fixture
def client(app, fake_repo) -> Generator[TestClient, None, None]:
    """
    TestClient wired to the fake repository.

    Properly cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_exercise_repo] = lambda: fake_repo
    yield TestClient(app)
    app.dependency_overrides.clear()
