"""Integration tests for the stubbed social share links."""

from __future__ import annotations

import pytest
from fastapi import status

from tests.integration.utils import register_with_headers


@pytest.mark.parametrize("network", ["instagram", "facebook"])
def test_share_link_is_stubbed(client, network):
    _, headers = register_with_headers(client, "Ana")

    response = client.post("/api/share", json={"itemId": 7, "network": network}, headers=headers)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "shareUrl": f"https://example.com/share/{network}/item/7",
        "note": "Stubbed share link (no real integration).",
    }


def test_share_link_validation(client):
    _, headers = register_with_headers(client, "Ana")

    response = client.post("/api/share", json={"itemId": 7, "network": "myspace"}, headers=headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "network must be instagram or facebook"}

    response = client.post("/api/share", json={"network": "facebook"}, headers=headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "itemId and network required"}

    assert client.post("/api/share", json={"itemId": 7, "network": "facebook"}).status_code == 401


def test_share_link_rejects_out_of_range_item_id(client):
    _, headers = register_with_headers(client, "Ana")

    response = client.post(
        "/api/share", json={"itemId": 2**64, "network": "facebook"}, headers=headers
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "error" in response.json()
