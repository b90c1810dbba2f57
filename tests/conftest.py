import os

# Set env vars BEFORE any imports that might cache them
os.environ["CONTACT_STORE"] = "memory"
os.environ["API_PREFIX"] = "/api"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from server import app  # noqa: E402
from services.contacts import InMemoryContactStore, get_contact_store  # noqa: E402


@pytest.fixture
def store():
    return InMemoryContactStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_contact_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
