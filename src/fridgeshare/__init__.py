"""
FridgeShare household food-sharing package.

The package exposes the HTTP API used to track fridge items, hand them out to friends
through claims, and coordinate friend groups with shared items and group chat.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
