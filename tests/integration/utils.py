"""Shared helpers for integration tests."""

from __future__ import annotations

from fastapi.testclient import TestClient


def register(client: TestClient, name: str, email: str | None = None) -> dict:
    """Register an account and return the ``{token, user}`` payload."""

    response = client.post(
        "/api/auth/register",
        json={
            "name": name,
            "email": email or f"{name.lower()}@example.com",
            "password": "pa55word",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def register_with_headers(client: TestClient, name: str) -> tuple[dict, dict[str, str]]:
    payload = register(client, name)
    return payload["user"], auth_headers(payload["token"])
