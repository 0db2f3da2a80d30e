"""Shared plumbing for stores whose rows are scoped to one owner."""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Callable

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from langbuddy.db.models.profile import LanguageProfile
from langbuddy.utils.exceptions import NotFoundError

IdFactory = Callable[[], str]
Clock = Callable[[], datetime]


def new_id() -> str:
    """Return a random UUID4 in its canonical text form."""

    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def page_offset(page: int, page_size: int) -> int:
    """Translate a 1-based page number into a row offset."""

    return (page - 1) * page_size


class OwnedRecordService:
    """Base class holding the session, id source and clock of a store."""

    def __init__(
        self,
        db: Session,
        *,
        id_factory: IdFactory = new_id,
        clock: Clock = utcnow,
    ):
        self.db = db
        self.id_factory = id_factory
        self.clock = clock

    def get_owned_profile(self, profile_id: str, user_id: str) -> LanguageProfile:
        """Return the caller's profile or raise ``NotFoundError``.

        A profile that exists but belongs to someone else is reported the
        same way as a missing one.
        """

        stmt = select(LanguageProfile).where(
            LanguageProfile.id == profile_id,
            LanguageProfile.user_id == user_id,
        )
        profile = self.db.scalars(stmt).first()
        if profile is None:
            logger.warning(f"Language profile {profile_id} not found for user {user_id}")
            raise NotFoundError("Language profile not found.")
        return profile
