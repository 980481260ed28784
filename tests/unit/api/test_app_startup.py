# tests/unit/api/test_app_startup.py
import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_membership_store
from src.core.exceptions import StoreError
from src.db.store import InMemoryMembershipStore
from src.main import app


class RecordingStore(InMemoryMembershipStore):
    def __init__(self):
        super().__init__()
        self.initialized = 0

    def initialize(self):
        self.initialized += 1


class BrokenSchemaStore(InMemoryMembershipStore):
    def initialize(self):
        raise StoreError("could not connect to server")


@pytest.fixture(autouse=True)
def clear_overrides():
    yield
    app.dependency_overrides.clear()


def test_startup_initializes_the_store():
    store = RecordingStore()
    app.dependency_overrides[get_membership_store] = lambda: store

    with TestClient(app) as client:
        assert store.initialized == 1
        response = client.post("/waitlist/join/", json={"email": "a@x.com"})

    assert response.status_code == 201
    assert store.initialized == 1


def test_startup_fails_when_store_cannot_initialize():
    app.dependency_overrides[get_membership_store] = lambda: BrokenSchemaStore()

    with pytest.raises(StoreError):
        with TestClient(app):
            pass
