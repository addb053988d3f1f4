import pytest
from decimal import Decimal
from fastapi.testclient import TestClient

from backend.app.db.base import Base
from backend.app.db.session import engine
from backend.app.main import app


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def register_and_login(client: TestClient, email: str, password: str) -> str:
    client.post("/auth/register", json={"email": email, "password": password})
    resp = client.post("/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200
    return resp.json()["access_token"]


def _create_item(client, headers, **overrides):
    payload = {
        "category": "GLASS",
        "name": "12mm Clear Tempered Glass",
        "description": "Crystal clear tempered safety glass, 12mm thickness",
        "unit": "sqm",
        "default_rate": 280.0,
    }
    payload.update(overrides)
    return client.post("/items/", json=payload, headers=headers)


def test_create_item_defaults_to_active():
    client = TestClient(app)
    headers = {"Authorization": f"Bearer {register_and_login(client, 'item1@example.com', 'secret')}"}
    resp = _create_item(client, headers)
    assert resp.status_code == 201
    data = resp.json()
    assert data["is_active"] is True
    assert data["category"] == "GLASS"
    assert Decimal(data["default_rate"]) == Decimal("280")


@pytest.mark.parametrize(
    "overrides",
    [{"category": "WOOD"}, {"default_rate": -5}, {"default_rate": "1.23456"}, {"name": ""}, {"unit": ""}],
)
def test_invalid_item_returns_400(overrides):
    client = TestClient(app)
    headers = {"Authorization": f"Bearer {register_and_login(client, 'item2@example.com', 'secret')}"}
    assert _create_item(client, headers, **overrides).status_code == 400


def test_list_items_filters_by_category_and_active():
    client = TestClient(app)
    headers = {"Authorization": f"Bearer {register_and_login(client, 'item3@example.com', 'secret')}"}
    _create_item(client, headers)
    _create_item(client, headers, category="ALUMINUM", name="Aluminum Profile System", unit="rm", default_rate=85)
    _create_item(client, headers, category="GLASS", name="Old Glass", is_active=False)

    assert len(client.get("/items/", headers=headers).json()) == 3
    glass = client.get("/items/", params={"category": "GLASS"}, headers=headers).json()
    assert {item["name"] for item in glass} == {"12mm Clear Tempered Glass", "Old Glass"}
    active_glass = client.get("/items/", params={"category": "GLASS", "active": "true"}, headers=headers).json()
    assert [item["name"] for item in active_glass] == ["12mm Clear Tempered Glass"]


def test_update_and_delete_item():
    client = TestClient(app)
    headers = {"Authorization": f"Bearer {register_and_login(client, 'item4@example.com', 'secret')}"}
    item_id = _create_item(client, headers).json()["id"]

    resp = client.patch(f"/items/{item_id}", json={"default_rate": 300, "is_active": False}, headers=headers)
    assert resp.status_code == 200
    assert Decimal(resp.json()["default_rate"]) == Decimal("300")
    assert resp.json()["is_active"] is False

    assert client.delete(f"/items/{item_id}", headers=headers).status_code == 200
    assert client.get(f"/items/{item_id}", headers=headers).status_code == 404
    assert client.patch(f"/items/{item_id}", json={"name": "x"}, headers=headers).status_code == 404
