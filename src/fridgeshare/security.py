"""Password hashing and session token helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from fridgeshare.errors import UnauthorizedError
from fridgeshare.models.base import ROW_ID_MAX, ROW_ID_MIN

BCRYPT_MAX_BYTES = 72

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass(frozen=True)
class TokenPayload:
    """Identity carried by a verified session token."""

    user_id: int
    email: str
    expires_at: datetime


def _truncate_for_bcrypt(plain: str) -> str:
    # bcrypt only looks at the first 72 bytes of the secret.
    encoded = plain.encode("utf-8")
    if len(encoded) > BCRYPT_MAX_BYTES:
        return encoded[:BCRYPT_MAX_BYTES].decode("utf-8", errors="ignore")
    return plain


def hash_password(plain: str) -> str:
    """Return a salted bcrypt hash for ``plain``."""

    return pwd_context.hash(_truncate_for_bcrypt(plain))


def verify_password(plain: str, hashed: str) -> bool:
    if not hashed:
        return False
    try:
        return pwd_context.verify(_truncate_for_bcrypt(plain), hashed)
    except ValueError:
        # Unrecognized hash format stored for the user.
        return False


def create_access_token(
    *,
    user_id: int,
    email: str,
    secret: str,
    algorithm: str = "HS256",
    expire_days: int = 7,
) -> str:
    """Sign a token carrying the user id and email, valid for ``expire_days``."""

    expire = datetime.now(timezone.utc) + timedelta(days=expire_days)
    payload = {"userId": user_id, "email": email, "exp": expire}
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(token: str, *, secret: str, algorithm: str = "HS256") -> TokenPayload:
    """Verify signature and expiry, returning the embedded identity.

    Raises :class:`UnauthorizedError` for any token that cannot be trusted.
    """

    try:
        claims = jwt.decode(
            token, secret, algorithms=[algorithm], options={"require_exp": True}
        )
    except ExpiredSignatureError as exc:
        raise UnauthorizedError("Token expired") from exc
    except JWTError as exc:
        raise UnauthorizedError() from exc

    user_id = claims.get("userId")
    if isinstance(user_id, bool) or not isinstance(user_id, int):
        raise UnauthorizedError()
    if not ROW_ID_MIN <= user_id <= ROW_ID_MAX:
        raise UnauthorizedError()

    return TokenPayload(
        user_id=user_id,
        email=str(claims.get("email") or ""),
        expires_at=datetime.fromtimestamp(int(claims["exp"]), tz=timezone.utc),
    )


__all__ = [
    "TokenPayload",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_access_token",
]
