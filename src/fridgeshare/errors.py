"""Error taxonomy shared by the data access layer and the HTTP routes."""

from __future__ import annotations


class FridgeShareError(Exception):
    """Base error carrying the HTTP status used to report it."""

    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
        self.message = message


class BadRequestError(FridgeShareError):
    """Malformed or missing input, or an invalid enum value."""

    status_code = 400


class UnauthorizedError(FridgeShareError):
    """Missing, invalid or expired token, or bad credentials."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class ForbiddenError(FridgeShareError):
    """Authenticated, but lacking the ownership or membership right."""

    status_code = 403

    def __init__(self, message: str = "Not allowed"):
        super().__init__(message)


class NotFoundError(FridgeShareError):
    status_code = 404


class ConflictError(FridgeShareError):
    status_code = 409


__all__ = [
    "FridgeShareError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
]
