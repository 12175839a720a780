"""Registration, login and current-user endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from fridgeshare.config import Settings
from fridgeshare.db.users import authenticate_credentials, register_user
from fridgeshare.models.users import AuthResponse, LoginRequest, PublicUser, RegisterRequest
from fridgeshare.security import create_access_token
from fridgeshare.server.deps import get_app_settings, get_current_user, get_db

router = APIRouter(prefix="/api", tags=["auth"])


def _issue_token(user: PublicUser, settings: Settings) -> str:
    return create_access_token(
        user_id=user.id,
        email=user.email,
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expire_days=settings.token_expire_days,
    )


@router.post(
    "/auth/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
)
def register(
    payload: RegisterRequest,
    session: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> AuthResponse:
    user = register_user(
        session,
        name=(payload.name or "").strip(),
        email=(payload.email or "").strip(),
        password=payload.password or "",
    )
    return AuthResponse(token=_issue_token(user, settings), user=user)


@router.post("/auth/login", response_model=AuthResponse, summary="Exchange credentials for a token")
def login(
    payload: LoginRequest,
    session: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> AuthResponse:
    user = authenticate_credentials(
        session,
        email=(payload.email or "").strip(),
        password=payload.password or "",
    )
    return AuthResponse(token=_issue_token(user, settings), user=user)


@router.get("/me", response_model=PublicUser, summary="Current user")
def me(user: PublicUser = Depends(get_current_user)) -> PublicUser:
    return user
