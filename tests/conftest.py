"""Shared pytest fixtures for the FridgeShare test suite."""

from __future__ import annotations

from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from fridgeshare.config import Settings, get_settings
from fridgeshare.db.repository import Database
from fridgeshare.server.app import create_app

TEST_JWT_SECRET = "test-jwt-secret"


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Ensure each test uses an isolated SQLite database location."""

    db_url = f"sqlite:///{tmp_path / 'test_fridgeshare.db'}"
    monkeypatch.setenv("FRIDGESHARE_DATABASE_URL", db_url)
    monkeypatch.setenv("FRIDGESHARE_JWT_SECRET", TEST_JWT_SECRET)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def settings() -> Settings:
    return get_settings()


@pytest.fixture()
def app(settings) -> Generator[FastAPI, None, None]:
    """Create a new FastAPI app instance for each test and reset overrides."""

    application = create_app(settings)
    yield application
    application.dependency_overrides.clear()
    application.state.database.dispose()


@pytest.fixture()
def client(app) -> TestClient:
    """Return a test client bound to the FastAPI app."""

    return TestClient(app)


@pytest.fixture()
def database(settings) -> Generator[Database, None, None]:
    """Standalone database handle for repository-level tests."""

    db = Database(settings.database_url)
    db.create_schema()
    yield db
    db.dispose()


@pytest.fixture()
def session(database) -> Generator[Session, None, None]:
    """Session committed after the test body, like a request-scoped session."""

    with database.session_scope() as db_session:
        yield db_session
