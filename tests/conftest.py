"""
- Keep the random source offline so tests never hit random.org
- Provide a fresh in-memory store per test and override FastAPI's get_store
- Provide a client fixture (TestClient(app)) that already has the override applied
"""
import os

import pytest
from fastapi.testclient import TestClient

# Must be set before mastermind.main loads its settings:
# outside "local" the app skips the allow-everything CORS middleware
os.environ["APP_ENV"] = "test"
os.environ.setdefault("MASTERMIND_RANDOM_SOURCE", "local")

from mastermind.main import app, get_store
from mastermind.store import GameStore


@pytest.fixture
def store() -> GameStore:
    return GameStore()


@pytest.fixture(autouse=True)
def override_dep(store):
    """Force the app to use this test's store for every request."""
    app.dependency_overrides[get_store] = lambda: store
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)
