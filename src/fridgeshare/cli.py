"""Command-line interface for FridgeShare."""

from __future__ import annotations

import json
from typing import Optional

import typer

from fridgeshare.config import get_settings
from fridgeshare.db.categories import ensure_default_categories
from fridgeshare.db.items import DEFAULT_EXPIRING_DAYS, MAX_EXPIRING_DAYS, list_expiring
from fridgeshare.db.repository import Database
from fridgeshare.db.users import get_user_by_email
from fridgeshare.logging_utils import configure_logging

app = typer.Typer(help="FridgeShare household food-sharing commands.")


def _open_database() -> Database:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format, [settings.jwt_secret])
    database = Database(settings.database_url)
    database.create_schema()
    return database


@app.command("init-db")
def init_db() -> None:
    """Create the schema and seed the default food categories."""

    database = _open_database()
    try:
        with database.session_scope() as session:
            added = ensure_default_categories(session)
    finally:
        database.dispose()
    typer.echo(f"Database ready ({added} categor{'y' if added == 1 else 'ies'} seeded).")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind."),
    port: int = typer.Option(3000, "--port", help="Port to listen on."),
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes."),
) -> None:
    """Run the HTTP API and web UI."""

    from fridgeshare.server.run import serve as run_server

    run_server(host=host, port=port, reload=reload)


@app.command()
def expiring(
    email: str = typer.Argument(..., help="Account whose fridge to inspect."),
    days: int = typer.Option(
        DEFAULT_EXPIRING_DAYS,
        "--days",
        min=-MAX_EXPIRING_DAYS,
        max=MAX_EXPIRING_DAYS,
        help="Look-ahead window in days.",
    ),
    pretty: bool = typer.Option(True, "--pretty/--no-pretty", help="Pretty-print output JSON."),
) -> None:
    """
    Print the user's IN_FRIDGE items expiring within the window.
    """

    database = _open_database()
    try:
        with database.session_scope() as session:
            user = get_user_by_email(session, email)
            if user is None:
                typer.secho(f"No user registered with email {email}", fg=typer.colors.RED, err=True)
                raise typer.Exit(code=1)
            items = list_expiring(session, owner_id=user.id, days=days)
    finally:
        database.dispose()

    payload = [item.model_dump(mode="json", by_alias=True) for item in items]
    typer.echo(json.dumps(payload, indent=2 if pretty else None, sort_keys=pretty))


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the ``fridgeshare`` console script."""
    app(prog_name="fridgeshare", args=argv)


if __name__ == "__main__":
    main()
