"""Integration tests for the claim endpoints."""

from __future__ import annotations

from fastapi import status

from tests.integration.utils import register_with_headers


def _available_item(client, headers, title="Milk") -> dict:
    item = client.post("/api/items", json={"title": title}, headers=headers).json()
    response = client.patch(
        f"/api/items/{item['id']}/status", json={"status": "AVAILABLE"}, headers=headers
    )
    assert response.status_code == status.HTTP_200_OK
    return response.json()


def test_claim_lifecycle(client):
    _, ana = register_with_headers(client, "Ana")
    bob_user, bob = register_with_headers(client, "Bob")
    milk = _available_item(client, ana)

    response = client.post("/api/claims", json={"itemId": milk["id"]}, headers=bob)
    assert response.status_code == status.HTTP_201_CREATED
    claim = response.json()
    assert claim["status"] == "PENDING"
    assert claim["claimerId"] == bob_user["id"]
    assert claim["decidedAt"] is None

    for_owner = client.get("/api/claims/for-owner", headers=ana).json()
    assert [entry["id"] for entry in for_owner] == [claim["id"]]
    assert for_owner[0]["item"]["title"] == "Milk"
    assert for_owner[0]["claimer"]["name"] == "Bob"

    mine = client.get("/api/claims/mine", headers=bob).json()
    assert [entry["id"] for entry in mine] == [claim["id"]]

    forbidden = client.post(
        f"/api/claims/{claim['id']}/decision", json={"decision": "ACCEPTED"}, headers=bob
    )
    assert forbidden.status_code == status.HTTP_403_FORBIDDEN

    decided = client.post(
        f"/api/claims/{claim['id']}/decision", json={"decision": "ACCEPTED"}, headers=ana
    )
    assert decided.status_code == status.HTTP_200_OK
    assert decided.json()["status"] == "ACCEPTED"
    assert decided.json()["decidedAt"] is not None

    items = client.get("/api/items", headers=ana).json()
    assert items[0]["status"] == "CLAIMED"
    assert [entry["status"] for entry in items[0]["claims"]] == ["ACCEPTED"]


def test_claim_rules(client):
    _, ana = register_with_headers(client, "Ana")
    _, bob = register_with_headers(client, "Bob")
    milk = _available_item(client, ana)
    eggs = client.post("/api/items", json={"title": "Eggs"}, headers=ana).json()

    own = client.post("/api/claims", json={"itemId": milk["id"]}, headers=ana)
    assert own.status_code == status.HTTP_400_BAD_REQUEST
    assert own.json() == {"error": "Cannot claim own item"}

    in_fridge = client.post("/api/claims", json={"itemId": eggs["id"]}, headers=bob)
    assert in_fridge.status_code == status.HTTP_400_BAD_REQUEST
    assert in_fridge.json() == {"error": "Item not available"}

    missing = client.post("/api/claims", json={}, headers=bob)
    assert missing.status_code == status.HTTP_400_BAD_REQUEST


def test_decision_must_be_accept_or_reject(client):
    _, ana = register_with_headers(client, "Ana")
    _, bob = register_with_headers(client, "Bob")
    milk = _available_item(client, ana)
    claim = client.post("/api/claims", json={"itemId": milk["id"]}, headers=bob).json()

    response = client.post(
        f"/api/claims/{claim['id']}/decision", json={"decision": "MAYBE"}, headers=ana
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST

    rejected = client.post(
        f"/api/claims/{claim['id']}/decision", json={"decision": "REJECTED"}, headers=ana
    )
    assert rejected.status_code == status.HTTP_200_OK
    assert client.get("/api/items", headers=ana).json()[0]["status"] == "AVAILABLE"


def test_claimed_item_cannot_be_handed_out_twice(client):
    _, ana = register_with_headers(client, "Ana")
    _, bob = register_with_headers(client, "Bob")
    _, carl = register_with_headers(client, "Carl")
    milk = _available_item(client, ana)
    bob_claim = client.post("/api/claims", json={"itemId": milk["id"]}, headers=bob).json()
    carl_claim = client.post("/api/claims", json={"itemId": milk["id"]}, headers=carl).json()

    accepted = client.post(
        f"/api/claims/{bob_claim['id']}/decision", json={"decision": "ACCEPTED"}, headers=ana
    )
    assert accepted.status_code == status.HTTP_200_OK

    second = client.post(
        f"/api/claims/{carl_claim['id']}/decision", json={"decision": "ACCEPTED"}, headers=ana
    )
    assert second.status_code == status.HTTP_400_BAD_REQUEST
    assert second.json() == {"error": "Item not available"}

    flipped = client.post(
        f"/api/claims/{bob_claim['id']}/decision", json={"decision": "REJECTED"}, headers=ana
    )
    assert flipped.status_code == status.HTTP_409_CONFLICT
    assert flipped.json() == {"error": "Claim already decided"}

    for_owner = client.get("/api/claims/for-owner", headers=ana).json()
    claims = {entry["id"]: entry for entry in for_owner}
    assert claims[bob_claim["id"]]["status"] == "ACCEPTED"
    assert claims[carl_claim["id"]]["status"] == "PENDING"
    assert client.get("/api/items", headers=ana).json()[0]["status"] == "CLAIMED"


def test_out_of_range_ids_are_rejected(client):
    _, ana = register_with_headers(client, "Ana")
    _, bob = register_with_headers(client, "Bob")
    milk = _available_item(client, ana)

    huge_body = client.post("/api/claims", json={"itemId": 2**64}, headers=bob)
    assert huge_body.status_code == status.HTTP_400_BAD_REQUEST
    assert "error" in huge_body.json()

    huge_path = client.post(
        f"/api/claims/{2**64}/decision", json={"decision": "ACCEPTED"}, headers=ana
    )
    assert huge_path.status_code == status.HTTP_400_BAD_REQUEST
    assert "error" in huge_path.json()

    assert client.post("/api/claims", json={"itemId": milk["id"]}, headers=bob).status_code == 201
