"""
Plain /customers resource endpoints.
"""
from __future__ import annotations

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from service.customer_store import CustomerStore, get_store

PAYLOAD = {
    "first_name": "Somchai",
    "last_name": "Test",
    "account_number": "123-456-789",
    "amount": 5000,
    "created_by": "scam report",
}


def test_create_returns_generated_id(client):
    resp = client.post("/customers/", json=PAYLOAD)

    assert resp.status_code == 201
    body = resp.json()
    assert isinstance(body["id"], int)
    assert body["phone_number"] is None


def test_create_requires_names_and_account(client):
    resp = client.post("/customers/", json={**PAYLOAD, "account_number": ""})

    assert resp.status_code == 422


def test_note_is_optional_for_the_resource_api(client):
    body = {k: v for k, v in PAYLOAD.items() if k != "created_by"}

    assert client.post("/customers/", json=body).status_code == 201


def test_search_by_account_substring(client):
    first = client.post("/customers/", json=PAYLOAD).json()
    client.post("/customers/", json={**PAYLOAD, "first_name": "Anan", "account_number": "0812345678"})

    rows = client.get("/customers/", params={"q": "456-789"}).json()

    assert [r["id"] for r in rows] == [first["id"]]


def test_blank_q_lists_all(client):
    client.post("/customers/", json=PAYLOAD)
    client.post("/customers/", json=PAYLOAD)

    assert len(client.get("/customers/", params={"q": " "}).json()) == 2
    assert len(client.get("/customers/").json()) == 2


def test_delete_is_idempotent(client):
    created = client.post("/customers/", json=PAYLOAD).json()

    assert client.delete(f"/customers/{created['id']}").status_code == 204
    assert client.delete(f"/customers/{created['id']}").status_code == 204
    assert client.get("/customers/").json() == []


def test_store_failure_maps_to_503():
    from main import app

    eng = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    broken = CustomerStore(sessionmaker(bind=eng))  # no tables
    app.dependency_overrides[get_store] = lambda: broken
    try:
        c = TestClient(app)
        assert c.post("/customers/", json=PAYLOAD).json() == {"detail": "save failed"}
        assert c.get("/customers/").status_code == 503
        assert c.delete("/customers/1").status_code == 503
    finally:
        app.dependency_overrides.clear()
