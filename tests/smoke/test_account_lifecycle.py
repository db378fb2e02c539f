"""Smoke tests: full account lifecycle through HTTP against a real database.

Each test opens ``TestClient(app)`` as a context manager, so the lifespan
creates the tables on a fresh in-memory SQLite database and disposes the
engine afterwards (StaticPool drops the data with its connection).

Flow covered:
1. Create account -> attach phone numbers -> list in creation order
2. Suspend -> numbers detached (not deleted) -> reactivate without reattachment
3. Conflicts: duplicate number, number for a suspended account
"""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from src.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def create_account(client: TestClient, description: str = "John Doe", **extra) -> dict:
    response = client.post(
        "/api/v1/accounts", json={"description": description, **extra}
    )
    assert response.status_code == 201, response.text
    return response.json()


def create_phone_number(
    client: TestClient, number: str, account_id: str | None = None
) -> dict:
    response = client.post(
        "/api/v1/phonenumbers", json={"number": number, "account_id": account_id}
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.smoke
def test_suspension_detaches_phone_numbers(client: TestClient):
    # Step 1: create account and attach a phone number
    account = create_account(client, status="active")
    assert account["description"] == "John Doe"
    assert account["status"] == "active"
    phone_number = create_phone_number(client, "1234567890", account["id"])
    assert phone_number["account_id"] == account["id"]

    # Step 2: suspend
    response = client.patch(
        f"/api/v1/accounts/{account['id']}", json={"status": "suspended"}
    )
    assert response.status_code == 200
    assert response.json()["status"] == "suspended"

    # Step 3: account owns nothing, the number still exists unattached
    response = client.get(f"/api/v1/accounts/{account['id']}/phonenumbers")
    assert response.status_code == 200
    assert response.json()["phone_numbers"] == []

    response = client.get(f"/api/v1/phonenumbers/{phone_number['id']}")
    assert response.status_code == 200
    assert response.json()["account_id"] is None


@pytest.mark.smoke
def test_phone_numbers_listed_in_creation_order(client: TestClient):
    account = create_account(client)
    numbers = ["5555555555", "1111111111", "33333333333"]
    for number in numbers:
        create_phone_number(client, number, account["id"])
    create_phone_number(client, "9999999999")

    response = client.get(f"/api/v1/accounts/{account['id']}/phonenumbers")

    data = response.json()
    assert [p["number"] for p in data["phone_numbers"]] == numbers
    assert all(p["account_id"] == account["id"] for p in data["phone_numbers"])


@pytest.mark.smoke
def test_suspend_twice_and_reactivate(client: TestClient):
    account = create_account(client)
    create_phone_number(client, "1234567890", account["id"])
    url = f"/api/v1/accounts/{account['id']}"

    assert client.patch(url, json={"status": "suspended"}).status_code == 200
    second = client.patch(url, json={"status": "suspended"})
    reactivated = client.patch(url, json={"status": "active"})
    unchanged = client.patch(url, json={})

    assert second.status_code == 200
    assert second.json()["status"] == "suspended"
    assert reactivated.json()["status"] == "active"
    assert unchanged.json()["status"] == "active"
    listing = client.get(f"{url}/phonenumbers").json()
    assert listing["phone_numbers"] == []


@pytest.mark.smoke
def test_domain_failures(client: TestClient):
    # Description length
    response = client.post("/api/v1/accounts", json={"description": "x" * 1024})
    assert response.status_code == 400
    assert response.json()["code"] == "VOICEFLEX_0005"

    # Unknown account
    unknown = uuid4()
    response = client.get(f"/api/v1/accounts/{unknown}/phonenumbers")
    assert response.status_code == 404
    assert response.json()["code"] == "VOICEFLEX_0000"
    response = client.patch(f"/api/v1/accounts/{unknown}", json={"status": "active"})
    assert response.status_code == 404
    response = client.post(
        "/api/v1/phonenumbers",
        json={"number": "1234567890", "account_id": str(unknown)},
    )
    assert response.status_code == 404

    # Invalid number
    response = client.post("/api/v1/phonenumbers", json={"number": "123-456"})
    assert response.status_code == 400
    assert response.json()["code"] == "VOICEFLEX_0001"

    # Duplicate number
    create_phone_number(client, "0987654321")
    response = client.post("/api/v1/phonenumbers", json={"number": "0987654321"})
    assert response.status_code == 409
    assert response.json()["code"] == "VOICEFLEX_0002"

    # Suspended account cannot receive numbers
    suspended = create_account(client, status="suspended")
    response = client.post(
        "/api/v1/phonenumbers",
        json={"number": "1112223334", "account_id": suspended["id"]},
    )
    assert response.status_code == 409
    assert response.json()["code"] == "VOICEFLEX_0003"


@pytest.mark.smoke
def test_health_with_live_database(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["database"] == "ok"
