import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.models import Item, Participant
from app.ratelimit import limiter
from app.store import BillStore, get_store


@pytest.fixture
def alice():
    return Participant(id="A", name="Alice")


@pytest.fixture
def bob():
    return Participant(id="B", name="Bob")


@pytest.fixture
def sample_items():
    """Burger for Alice, fries shared by Alice and Bob."""
    return [
        Item(id="item-1", name="Burger", price=12.99, assigned_to=["A"]),
        Item(id="item-2", name="Fries", price=4.99, assigned_to=["A", "B"]),
    ]


@pytest.fixture
def store():
    return BillStore()


@pytest.fixture
def client(store, monkeypatch):
    monkeypatch.setattr(limiter, "enabled", False)
    monkeypatch.setenv("RECEIPT_PROVIDER", "mock")
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def bill(client):
    """A bill created through the API, as returned by POST /api/bills."""
    resp = client.post("/api/bills", json={"participants": ["Alice", "Bob"]})
    assert resp.status_code == 201
    return resp.json()
