import pytest
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


def test_dashboard_summary_counts_and_recent():
    client = TestClient(app)
    headers = {"Authorization": f"Bearer {register_and_login(client, 'dash@example.com', 'secret')}"}
    customer_id = client.post("/customers/", json={"company_name": "Acme"}, headers=headers).json()["id"]
    client.post(
        "/items/",
        json={"category": "LABOR", "name": "Installer", "unit": "day", "default_rate": 400},
        headers=headers,
    )
    client.post(
        "/items/",
        json={"category": "MISC", "name": "Retired", "unit": "nos", "default_rate": 1, "is_active": False},
        headers=headers,
    )
    for status in ("DRAFT", "SENT", "DRAFT"):
        client.post(
            "/quotations/",
            json={
                "customer_id": customer_id,
                "project_name": f"Project {status}",
                "status": status,
                "items": [{"scope_of_work": "Glass", "quantity": 1, "rate": 100}],
            },
            headers=headers,
        )

    data = client.get("/dashboard/summary", headers=headers).json()
    assert data["total_quotations"] == 3
    assert data["draft_quotations"] == 2
    assert data["customers"] == 1
    assert data["active_items"] == 1
    assert len(data["recent_quotations"]) == 3
    assert data["recent_quotations"][0]["quotation_number"].endswith("-0003")
    assert data["recent_quotations"][0]["customer_name"] == "Acme"


def test_scope_templates_filter_by_category():
    client = TestClient(app)
    headers = {"Authorization": f"Bearer {register_and_login(client, 'tmpl@example.com', 'secret')}"}
    templates = client.get("/templates/", headers=headers).json()
    assert templates and all({"name", "category", "scope_of_work", "unit"} <= set(t) for t in templates)

    glass = client.get("/templates/", params={"category": "GLASS"}, headers=headers).json()
    assert glass and all(t["category"] == "GLASS" for t in glass)
    assert client.get("/templates/", params={"category": "WOOD"}, headers=headers).status_code == 400
