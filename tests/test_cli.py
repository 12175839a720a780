"""Tests for the ``fridgeshare`` command-line interface."""

from __future__ import annotations

import json
from datetime import timedelta

import pytest
from typer.testing import CliRunner

from fridgeshare.cli import app
from fridgeshare.config import get_settings
from fridgeshare.db.categories import DEFAULT_CATEGORIES
from fridgeshare.db.items import create_item
from fridgeshare.db.models import utcnow
from tests.db.helpers import make_user

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logs(monkeypatch):
    """Keep log lines out of the captured command output."""

    monkeypatch.setenv("FRIDGESHARE_LOG_LEVEL", "WARNING")
    get_settings.cache_clear()


def test_init_db_seeds_categories():
    result = runner.invoke(app, ["init-db"])

    assert result.exit_code == 0, result.output
    assert f"{len(DEFAULT_CATEGORIES)} categories seeded" in result.output

    again = runner.invoke(app, ["init-db"])
    assert "0 categories seeded" in again.output


def test_expiring_prints_items(database):
    with database.session_scope() as session:
        ana = make_user(session, "Ana")
        create_item(
            session,
            owner_id=ana.id,
            title="Cream",
            expires_at=utcnow() + timedelta(days=1),
        )
        create_item(session, owner_id=ana.id, title="Pasta")

    result = runner.invoke(app, ["expiring", "ana@example.com", "--no-pretty"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert [item["title"] for item in payload] == ["Cream"]
    assert payload[0]["status"] == "IN_FRIDGE"
    assert "expiresAt" in payload[0]


def test_expiring_unknown_user_fails():
    result = runner.invoke(app, ["expiring", "ghost@example.com"])

    assert result.exit_code == 1


def test_expiring_rejects_window_outside_date_range():
    result = runner.invoke(app, ["expiring", "ana@example.com", "--days", "10000000"])

    assert result.exit_code == 2
