"""Dependency definitions for the FridgeShare API server."""

from __future__ import annotations

import logging
from typing import Annotated, Generator, Optional

from fastapi import Depends, Path, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from fridgeshare.config import Settings
from fridgeshare.db.repository import Database
from fridgeshare.db.users import get_user
from fridgeshare.errors import UnauthorizedError
from fridgeshare.models.base import ROW_ID_MAX, ROW_ID_MIN
from fridgeshare.models.users import PublicUser
from fridgeshare.security import decode_access_token

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

# Path ids outside the SQL INTEGER range are rejected as a 400 before any query.
RowIdPath = Annotated[int, Path(ge=ROW_ID_MIN, le=ROW_ID_MAX)]


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""

    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(database: Database = Depends(get_database)) -> Generator[Session, None, None]:
    """Yield one session per request, committed when the handler succeeds."""

    with database.session_scope() as session:
        yield session


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    session: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> PublicUser:
    """Resolve the bearer token to a user that still exists in the store."""

    if credentials is None or not credentials.credentials:
        raise UnauthorizedError()

    payload = decode_access_token(
        credentials.credentials,
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )
    user = get_user(session, payload.user_id)
    if user is None:
        logger.info("Rejected token for missing user id=%s", payload.user_id)
        raise UnauthorizedError()

    request.state.user_id = user.id
    return user


__all__ = [
    "RowIdPath",
    "bearer_scheme",
    "get_app_settings",
    "get_database",
    "get_db",
    "get_current_user",
]
