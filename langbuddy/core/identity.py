"""Identity gate shared by every learning-data operation."""
from __future__ import annotations

from loguru import logger

from langbuddy.db.models.user import User
from langbuddy.utils.exceptions import UnauthorizedError


def require_user(user: User | None) -> User:
    """Return the caller or raise ``UnauthorizedError`` when nobody is signed in."""

    if user is None:
        logger.warning("Rejected call without an authenticated identity")
        raise UnauthorizedError("You must be signed in to perform this action.")
    return user
