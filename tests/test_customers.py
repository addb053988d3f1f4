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


def test_create_and_list_customers():
    client = TestClient(app)
    token = register_and_login(client, "cust1@example.com", "secret")
    headers = {"Authorization": f"Bearer {token}"}

    resp = client.post(
        "/customers/",
        json={
            "company_name": "Dubai Properties Group",
            "contact_person": "Sara Johnson",
            "phone": "+971-4-234-5678",
            "email": "sara@dubaiproperties.ae",
            "address": "Downtown Dubai, UAE",
        },
        headers=headers,
    )
    assert resp.status_code == 201
    data = resp.json()
    assert data["company_name"] == "Dubai Properties Group"
    assert data["email"] == "sara@dubaiproperties.ae"

    client.post("/customers/", json={"company_name": "Al Futtaim"}, headers=headers)
    names = [c["company_name"] for c in client.get("/customers/", headers=headers).json()]
    assert names == ["Al Futtaim", "Dubai Properties Group"]


def test_blank_optional_fields_are_stored_as_null():
    client = TestClient(app)
    token = register_and_login(client, "cust2@example.com", "secret")
    resp = client.post(
        "/customers/",
        json={"company_name": "Blank Co", "email": "", "phone": "  "},
        headers={"Authorization": f"Bearer {token}"},
    )
    assert resp.status_code == 201
    assert resp.json()["email"] is None
    assert resp.json()["phone"] is None


@pytest.mark.parametrize("payload", [{"company_name": ""}, {"contact_person": "No company"}, {"company_name": "X", "email": "bad"}])
def test_invalid_customer_returns_400(payload):
    client = TestClient(app)
    token = register_and_login(client, "cust3@example.com", "secret")
    resp = client.post("/customers/", json=payload, headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 400


def test_get_update_and_delete_customer():
    client = TestClient(app)
    token = register_and_login(client, "cust4@example.com", "secret")
    headers = {"Authorization": f"Bearer {token}"}
    customer_id = client.post("/customers/", json={"company_name": "Old Name"}, headers=headers).json()["id"]

    assert client.get(f"/customers/{customer_id}", headers=headers).json()["company_name"] == "Old Name"

    updated = client.patch(
        f"/customers/{customer_id}", json={"company_name": "New Name", "phone": "+971-50-000-0000"}, headers=headers
    )
    assert updated.status_code == 200
    assert updated.json()["company_name"] == "New Name"
    assert updated.json()["phone"] == "+971-50-000-0000"

    deleted = client.delete(f"/customers/{customer_id}", headers=headers)
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Customer deleted successfully"}
    assert client.get(f"/customers/{customer_id}", headers=headers).status_code == 404
    assert client.delete(f"/customers/{customer_id}", headers=headers).status_code == 404


def test_customer_with_quotations_cannot_be_deleted():
    client = TestClient(app)
    token = register_and_login(client, "cust5@example.com", "secret")
    headers = {"Authorization": f"Bearer {token}"}
    customer_id = client.post("/customers/", json={"company_name": "Busy Co"}, headers=headers).json()["id"]
    client.post(
        "/quotations/",
        json={
            "customer_id": customer_id,
            "project_name": "Tower",
            "items": [{"scope_of_work": "Glass", "quantity": 1, "rate": 10}],
        },
        headers=headers,
    )

    resp = client.delete(f"/customers/{customer_id}", headers=headers)
    assert resp.status_code == 400
    assert client.get(f"/customers/{customer_id}", headers=headers).status_code == 200
