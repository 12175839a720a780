"""Integration tests for the single-page UI delivery."""

from __future__ import annotations

from fastapi import status
from fastapi.testclient import TestClient

from fridgeshare.server.app import create_app
from fridgeshare.server.ui import _resolve_dist_file


def test_ui_homepage_served(client):
    """GET / should return the bundled HTML UI page."""

    response = client.get("/")

    assert response.status_code == status.HTTP_200_OK
    assert "FridgeShare" in response.text
    assert "createApp" in response.text


def test_client_routes_fall_back_to_ui(client):
    response = client.get("/groups/12")

    assert response.status_code == status.HTTP_200_OK
    assert "FridgeShare" in response.text


def test_unknown_api_path_is_json_404(client):
    response = client.get("/api/does-not-exist")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "Not found"}


def test_client_dist_is_served(tmp_path, settings):
    dist = tmp_path / "dist"
    (dist / "assets").mkdir(parents=True)
    (dist / "index.html").write_text("<html>built client</html>", encoding="utf-8")
    (dist / "assets" / "app.js").write_text("console.log('hi')", encoding="utf-8")
    app = create_app(settings.model_copy(update={"client_dist_path": dist}))

    with TestClient(app) as client:
        assert client.get("/assets/app.js").text == "console.log('hi')"
        assert "built client" in client.get("/").text
        assert "built client" in client.get("/fridge/today").text


def test_client_dist_without_index_reports_api(tmp_path, settings):
    dist = tmp_path / "empty-dist"
    dist.mkdir()
    app = create_app(settings.model_copy(update={"client_dist_path": dist}))

    with TestClient(app) as client:
        response = client.get("/")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "API is running"}


def test_dist_lookup_stays_inside_bundle(tmp_path):
    dist = tmp_path / "dist"
    dist.mkdir()
    (tmp_path / "secrets.txt").write_text("nope", encoding="utf-8")
    (dist / "app.js").write_text("ok", encoding="utf-8")

    assert _resolve_dist_file(dist, "app.js") == (dist / "app.js").resolve()
    assert _resolve_dist_file(dist, "../secrets.txt") is None
    assert _resolve_dist_file(dist, "") is None
