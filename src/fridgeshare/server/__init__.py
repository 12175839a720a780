"""ASGI application factory and dependencies for the FridgeShare server."""

from fridgeshare.server.app import create_app

__all__ = ["create_app"]
