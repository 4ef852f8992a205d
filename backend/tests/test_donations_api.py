from decimal import Decimal

from fastapi.testclient import TestClient


def _donate(client: TestClient, **overrides):
    payload = {
        "donor_name": "Ada Lovelace",
        "email": "ada@example.org",
        "amount": "100.00",
        "transaction_id": "T1",
    }
    payload.update(overrides)
    return client.post("/api/donations", json=payload)


def test_create_donation(client: TestClient):
    response = _donate(client)

    assert response.status_code == 201
    data = response.json()
    assert data["id"] is not None
    assert Decimal(str(data["amount"])) == Decimal("100.00")
    assert data["transaction_id"] == "T1"
    assert data["type"] == "ONE_TIME"


def test_duplicate_transaction_conflicts(client: TestClient):
    assert _donate(client).status_code == 201

    response = _donate(client, amount="50.00")

    assert response.status_code == 409
    history = client.get("/api/donations/history", params={"email": "ada@example.org"}).json()
    assert len(history) == 1
    assert Decimal(str(history[0]["amount"])) == Decimal("100.00")


def test_invalid_amounts_are_bad_requests(client: TestClient):
    assert _donate(client, amount="0").status_code == 400
    assert _donate(client, amount="-10", transaction_id="T2").status_code == 400
    assert _donate(client, amount=None, transaction_id="T3").status_code == 400


def test_missing_transaction_id_is_bad_request(client: TestClient):
    response = _donate(client, transaction_id=None)
    assert response.status_code == 400


def test_webhook_approved(client: TestClient):
    response = client.post("/api/donations/webhook/T1", params={"status": "approved"})

    assert response.status_code == 200
    assert response.json() == {"message": "Payment validated successfully", "transaction_id": "T1"}


def test_webhook_other_status(client: TestClient):
    response = client.post("/api/donations/webhook/T1", params={"status": "pending"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid payment data"


def test_webhook_requires_status(client: TestClient):
    response = client.post("/api/donations/webhook/T1")
    assert response.status_code == 422


def test_stats(client: TestClient):
    empty = client.get("/api/donations/stats").json()
    assert Decimal(str(empty["total_amount"])) == Decimal("0.00")
    assert empty["total_count"] == 0

    _donate(client, amount="10.00", transaction_id="A")
    _donate(client, amount="20.50", transaction_id="B")

    stats = client.get("/api/donations/stats").json()
    assert Decimal(str(stats["total_amount"])) == Decimal("30.50")
    assert stats["total_count"] == 2
    assert stats["one_time_count"] == 2
    assert stats["subscription_count"] == 0

    future = client.get(
        "/api/donations/stats",
        params={"start": "2999-01-01T00:00:00", "end": "2999-12-31T00:00:00"},
    ).json()
    assert future["total_count"] == 0


def test_stats_rejects_inverted_range(client: TestClient):
    response = client.get(
        "/api/donations/stats",
        params={"start": "2026-02-01T00:00:00", "end": "2026-01-01T00:00:00"},
    )
    assert response.status_code == 400


def test_admin_stats_include_donations(client: TestClient):
    _donate(client, amount="12.34", transaction_id="A")

    stats = client.get("/api/admin/stats").json()
    assert stats["total_donations"] == 1
    assert Decimal(str(stats["total_donation_amount"])) == Decimal("12.34")
