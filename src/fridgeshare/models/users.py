"""Account payloads."""

from __future__ import annotations

from typing import Optional

from fridgeshare.models.base import ApiModel


class PublicUser(ApiModel):
    """User fields safe to show to anyone, never including the password hash."""

    id: int
    name: str
    email: str


class RegisterRequest(ApiModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(ApiModel):
    email: Optional[str] = None
    password: Optional[str] = None


class AuthResponse(ApiModel):
    token: str
    user: PublicUser


__all__ = ["PublicUser", "RegisterRequest", "LoginRequest", "AuthResponse"]
