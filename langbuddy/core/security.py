"""Password hashing and the bearer tokens that carry a caller's identity."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import bcrypt
from jose import JWTError, jwt
from pydantic import ValidationError

from langbuddy.config import settings
from langbuddy.schemas.auth import TokenPayload


ALGORITHM = "HS256"
ACCESS = "access"
REFRESH = "refresh"


class InvalidTokenError(Exception):
    """Raised when a bearer token cannot identify a caller."""


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check ``plain_password`` against a stored bcrypt hash."""

    return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))


def issue_token(user_id: str, token_type: str, lifetime: timedelta) -> str:
    """Sign a token naming ``user_id`` that expires after ``lifetime``."""

    claims: Dict[str, Any] = {
        "sub": user_id,
        "type": token_type,
        "exp": datetime.now(timezone.utc) + lifetime,
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=ALGORITHM)


def create_access_token(user_id: str) -> str:
    return issue_token(user_id, ACCESS, timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))


def create_refresh_token(user_id: str) -> str:
    return issue_token(user_id, REFRESH, timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS))


def decode_access_token(token: str) -> str:
    """Return the user id carried by an access token.

    Bad signatures, expired tokens, malformed claims and refresh tokens all
    raise ``InvalidTokenError``.
    """

    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
        payload = TokenPayload.model_validate(claims)
    except (JWTError, ValidationError) as exc:
        raise InvalidTokenError(str(exc)) from exc

    if payload.type != ACCESS:
        raise InvalidTokenError(f"Expected an access token, got {payload.type!r}")
    return payload.sub
