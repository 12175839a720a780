"""Integration tests for the legacy donation board."""

from __future__ import annotations

from fastapi import status


def test_donations_are_public(client):
    assert client.get("/api/donations").json() == []

    response = client.post(
        "/api/donations",
        json={"item": "Apples", "quantity": 5, "location": "Block C lobby"},
    )
    assert response.status_code == status.HTTP_201_CREATED
    created = response.json()
    assert created["item"] == "Apples"
    assert created["quantity"] == "5"
    assert created["location"] == "Block C lobby"

    client.post(
        "/api/donations",
        json={"item": "Bread", "quantity": "2 loaves", "location": "Library"},
    )
    listed = client.get("/api/donations").json()
    assert [entry["item"] for entry in listed] == ["Bread", "Apples"]


def test_donation_requires_all_fields(client):
    response = client.post("/api/donations", json={"item": "Apples", "location": "Lobby"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "item, quantity, and location are required"}
