"""Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

from fridgeshare.config import Settings, get_settings


def test_defaults():
    settings = Settings()

    assert settings.jwt_algorithm == "HS256"
    assert settings.token_expire_days == 7
    assert settings.client_dist_path is None
    assert settings.cors_origins == ["*"]


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("FRIDGESHARE_CLIENT_DIST", str(tmp_path))
    monkeypatch.setenv("FRIDGESHARE_CORS_ORIGINS", "http://localhost:5173, https://fridge.example")
    monkeypatch.setenv("FRIDGESHARE_TOKEN_EXPIRE_DAYS", "14")
    monkeypatch.setenv("FRIDGESHARE_LOG_REQUESTS", "off")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.client_dist_path == Path(str(tmp_path))
    assert settings.cors_origins == ["http://localhost:5173", "https://fridge.example"]
    assert settings.token_expire_days == 14
    assert settings.log_requests is False
    assert settings.jwt_secret == "test-jwt-secret"


def test_plain_jwt_secret_variable_is_honoured(monkeypatch):
    monkeypatch.delenv("FRIDGESHARE_JWT_SECRET")
    monkeypatch.setenv("JWT_SECRET", "from-plain-var")
    get_settings.cache_clear()

    assert get_settings().jwt_secret == "from-plain-var"


def test_invalid_token_lifetime_is_ignored(monkeypatch):
    monkeypatch.setenv("FRIDGESHARE_TOKEN_EXPIRE_DAYS", "soon")
    get_settings.cache_clear()

    assert get_settings().token_expire_days == 7
