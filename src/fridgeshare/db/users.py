"""Account data access helpers."""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fridgeshare.errors import BadRequestError, ConflictError, UnauthorizedError
from fridgeshare.models.users import PublicUser
from fridgeshare.security import hash_password, verify_password

from .models import UserORM

logger = logging.getLogger(__name__)

SEARCH_MIN_LENGTH = 2
SEARCH_LIMIT = 10


def _to_model(row: UserORM) -> PublicUser:
    return PublicUser(id=row.id, name=row.name, email=row.email)


def get_user(session: Session, user_id: int) -> Optional[PublicUser]:
    row = session.get(UserORM, user_id)
    if row is None:
        return None
    return _to_model(row)


def get_user_by_email(session: Session, email: str) -> Optional[PublicUser]:
    row = session.execute(select(UserORM).where(UserORM.email == email)).scalar_one_or_none()
    if row is None:
        return None
    return _to_model(row)


def register_user(session: Session, *, name: str, email: str, password: str) -> PublicUser:
    """Create an account with a salted password hash.

    Raises :class:`ConflictError` when the email is already registered.
    """

    if not name or not email or not password:
        raise BadRequestError("name, email, password required")

    existing = session.execute(select(UserORM.id).where(UserORM.email == email)).first()
    if existing:
        raise ConflictError("Email already registered")

    row = UserORM(name=name, email=email, password_hash=hash_password(password))
    session.add(row)
    try:
        session.flush()
    except IntegrityError as exc:
        raise ConflictError("Email already registered") from exc

    logger.info("Registered user id=%s", row.id)
    return _to_model(row)


def authenticate_credentials(session: Session, *, email: str, password: str) -> PublicUser:
    """Return the user matching ``email``/``password`` or raise Unauthorized."""

    if not email or not password:
        raise BadRequestError("email and password required")

    row = session.execute(select(UserORM).where(UserORM.email == email)).scalar_one_or_none()
    if row is None or not verify_password(password, row.password_hash):
        raise UnauthorizedError("Invalid credentials")
    return _to_model(row)


def search_users(session: Session, *, caller_id: int, query: str) -> List[PublicUser]:
    """Find other accounts whose name or email contains ``query``."""

    needle = (query or "").strip()
    if len(needle) < SEARCH_MIN_LENGTH:
        raise BadRequestError(f"q must have at least {SEARCH_MIN_LENGTH} characters")

    rows = (
        session.execute(
            select(UserORM)
            .where(
                or_(
                    UserORM.name.contains(needle, autoescape=True),
                    UserORM.email.contains(needle, autoescape=True),
                ),
                UserORM.id != caller_id,
            )
            .order_by(UserORM.created_at.desc(), UserORM.id.desc())
            .limit(SEARCH_LIMIT)
        )
        .scalars()
        .all()
    )
    return [_to_model(row) for row in rows]


__all__ = [
    "get_user",
    "get_user_by_email",
    "register_user",
    "authenticate_credentials",
    "search_users",
]
