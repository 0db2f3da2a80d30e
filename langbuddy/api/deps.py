"""Shared API dependencies."""
from __future__ import annotations

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from loguru import logger
from sqlalchemy.orm import Session

from langbuddy.config import settings
from langbuddy.core.identity import require_user
from langbuddy.core.security import InvalidTokenError, decode_access_token
from langbuddy.db.models.user import User
from langbuddy.db.session import get_db
from langbuddy.services.practice import PracticeSessionService
from langbuddy.services.profiles import ProfileService
from langbuddy.services.vocabulary import VocabularyService

oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_V1_STR}/auth/login", auto_error=False
)

__all__ = [
    "get_db",
    "get_optional_user",
    "get_current_user",
    "get_profile_service",
    "get_vocabulary_service",
    "get_practice_session_service",
]


def get_optional_user(
    token: str | None = Depends(oauth2_scheme), db: Session = Depends(get_db)
) -> User | None:
    """Resolve the caller from the Authorization header, or ``None``."""

    if not token:
        return None

    try:
        user_id = decode_access_token(token)
    except InvalidTokenError as exc:
        logger.warning(f"Ignoring unusable bearer token: {exc}")
        return None

    user = db.get(User, user_id)
    if not user or not user.is_active:
        return None
    return user


def get_current_user(user: User | None = Depends(get_optional_user)) -> User:
    """Identity gate as a dependency: the signed-in user or ``UnauthorizedError``."""

    return require_user(user)


def get_profile_service(db: Session = Depends(get_db)) -> ProfileService:
    return ProfileService(db)


def get_vocabulary_service(db: Session = Depends(get_db)) -> VocabularyService:
    return VocabularyService(db)


def get_practice_session_service(db: Session = Depends(get_db)) -> PracticeSessionService:
    return PracticeSessionService(db)
