"""Helper for running the FridgeShare ASGI application."""

from __future__ import annotations

import asyncio
import os
from typing import Optional

import uvicorn

APP_FACTORY = "fridgeshare.server.app:create_app"


async def _serve_with_duration(server: uvicorn.Server, duration: float) -> None:
    """Run the server and shut it down after the specified duration."""

    async def _shutdown() -> None:
        await asyncio.sleep(duration)
        server.should_exit = True

    asyncio.create_task(_shutdown())
    await server.serve()


def _parse_duration(value: str | None) -> Optional[float]:
    if not value:
        return None
    try:
        parsed = float(value)
    except ValueError as exc:
        raise SystemExit(f"Invalid FRIDGESHARE_SERVER_DURATION '{value}': {exc}") from exc
    if parsed <= 0:
        raise SystemExit("FRIDGESHARE_SERVER_DURATION must be greater than 0 when provided.")
    return parsed


def serve(
    host: str = "127.0.0.1",
    port: int = 3000,
    reload: bool = False,
    duration: Optional[float] = None,
) -> None:
    """Start uvicorn, optionally stopping after ``duration`` seconds."""

    if reload and duration is not None:
        raise SystemExit("Reload cannot be combined with a fixed server duration.")

    if reload:
        uvicorn.run(APP_FACTORY, host=host, port=port, reload=True, factory=True)
        return

    config = uvicorn.Config(APP_FACTORY, host=host, port=port, reload=False, factory=True)
    server = uvicorn.Server(config)

    if duration is not None:
        asyncio.run(_serve_with_duration(server, duration))
        return

    server.run()


def main() -> None:
    """Entry point for the ``fridgeshare-server`` script."""

    serve(
        host=os.environ.get("FRIDGESHARE_SERVER_HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT") or os.environ.get("FRIDGESHARE_SERVER_PORT", "3000")),
        reload=os.environ.get("RELOAD") == "1",
        duration=_parse_duration(os.environ.get("FRIDGESHARE_SERVER_DURATION")),
    )


if __name__ == "__main__":
    main()
