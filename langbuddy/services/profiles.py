"""Service layer for language profiles."""
from __future__ import annotations

from typing import Any

from loguru import logger
from sqlalchemy import select, update

from langbuddy.db.models.profile import LanguageProfile
from langbuddy.schemas.profile import LanguageProfileCreate, LanguageProfileUpdate
from langbuddy.services.base import OwnedRecordService

MERGE_FIELDS = (
    "target_language",
    "native_language",
    "proficiency_level",
    "goals",
    "is_active",
)


class ProfileService(OwnedRecordService):
    """Create, update and list the caller's language profiles."""

    def create(self, user_id: str, payload: LanguageProfileCreate) -> LanguageProfile:
        """Insert a new active profile owned by ``user_id``."""

        now = self.clock()
        profile = LanguageProfile(
            id=self.id_factory(),
            user_id=user_id,
            target_language=payload.target_language,
            native_language=payload.native_language,
            proficiency_level=payload.proficiency_level,
            goals=payload.goals,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        self.db.add(profile)
        self.db.commit()
        logger.info(f"Created language profile {profile.id} for user {user_id}")
        return profile

    def update(
        self, user_id: str, profile_id: str, payload: LanguageProfileUpdate
    ) -> LanguageProfile:
        """Merge supplied values over the stored profile.

        Fields that are omitted or null keep their stored value.
        """

        profile = self.get_owned_profile(profile_id, user_id)

        values: dict[str, Any] = {}
        for field in MERGE_FIELDS:
            value = getattr(payload, field)
            values[field] = value if value is not None else getattr(profile, field)
        values["updated_at"] = self.clock()

        self.db.execute(
            update(LanguageProfile)
            .where(LanguageProfile.id == profile_id, LanguageProfile.user_id == user_id)
            .values(**values)
        )
        self.db.commit()
        logger.info(f"Updated language profile {profile_id}")
        return profile

    def list_profiles(
        self, user_id: str, *, include_inactive: bool = False
    ) -> list[LanguageProfile]:
        """Return every profile owned by ``user_id``, active ones only by default."""

        stmt = select(LanguageProfile).where(LanguageProfile.user_id == user_id)
        if not include_inactive:
            stmt = stmt.where(LanguageProfile.is_active.is_(True))
        stmt = stmt.order_by(LanguageProfile.created_at, LanguageProfile.id)
        return list(self.db.scalars(stmt))
