"""Service layer for vocabulary items."""
from __future__ import annotations

from typing import Any

from loguru import logger
from sqlalchemy import delete, select, update

from langbuddy.db.models.vocabulary import VocabularyItem
from langbuddy.schemas.vocabulary import VocabularyItemRead, VocabularyItemUpsert
from langbuddy.services.base import OwnedRecordService, page_offset
from langbuddy.utils.exceptions import NotFoundError

ITEM_FIELDS = (
    "language_profile_id",
    "term",
    "translation",
    "part_of_speech",
    "example_sentence",
    "example_translation",
    "difficulty",
    "tags",
    "last_reviewed_at",
    "next_review_at",
    "success_streak",
    "total_reviews",
)


class VocabularyService(OwnedRecordService):
    """Upsert, delete and page through the caller's vocabulary items."""

    def get_owned_item(self, item_id: str, user_id: str) -> VocabularyItem:
        stmt = select(VocabularyItem).where(
            VocabularyItem.id == item_id,
            VocabularyItem.user_id == user_id,
        )
        item = self.db.scalars(stmt).first()
        if item is None:
            logger.warning(f"Vocabulary item {item_id} not found for user {user_id}")
            raise NotFoundError("Vocabulary item not found.")
        return item

    def upsert(self, user_id: str, payload: VocabularyItemUpsert) -> VocabularyItemRead:
        """Create an item, or overwrite the item named by ``payload.id``.

        An overwrite replaces every field: values omitted from ``payload``
        are cleared in storage. The returned record is the prior row with
        the supplied fields laid over it, so it can still show values the
        overwrite has just cleared.
        """

        self.get_owned_profile(payload.language_profile_id, user_id)
        now = self.clock()
        values: dict[str, Any] = {field: getattr(payload, field) for field in ITEM_FIELDS}

        if payload.id:
            existing = self.get_owned_item(payload.id, user_id)
            prior = VocabularyItemRead.model_validate(existing).model_dump()

            self.db.execute(
                update(VocabularyItem)
                .where(VocabularyItem.id == payload.id, VocabularyItem.user_id == user_id)
                .values(**values, updated_at=now)
            )
            self.db.commit()
            logger.info(f"Overwrote vocabulary item {payload.id}")
            return VocabularyItemRead.model_validate(
                {
                    **prior,
                    **payload.model_dump(exclude_unset=True),
                    "updated_at": now,
                    "user_id": user_id,
                }
            )

        item = VocabularyItem(
            id=self.id_factory(),
            user_id=user_id,
            created_at=now,
            updated_at=now,
            **values,
        )
        self.db.add(item)
        self.db.commit()
        logger.info(f"Created vocabulary item {item.id} in profile {payload.language_profile_id}")
        return VocabularyItemRead.model_validate(item)

    def delete(self, user_id: str, item_id: str) -> None:
        """Delete the caller's item, raising ``NotFoundError`` if nothing matched."""

        result = self.db.execute(
            delete(VocabularyItem).where(
                VocabularyItem.id == item_id,
                VocabularyItem.user_id == user_id,
            )
        )
        if result.rowcount == 0:
            self.db.rollback()
            logger.warning(f"Vocabulary item {item_id} not found for user {user_id}")
            raise NotFoundError("Vocabulary item not found.")
        self.db.commit()
        logger.info(f"Deleted vocabulary item {item_id}")

    def list_items(
        self, user_id: str, *, language_profile_id: str, page: int, page_size: int
    ) -> list[VocabularyItem]:
        """Return one page of the caller's items in ``language_profile_id``.

        The profile itself is not looked up; a profile the caller does not
        own simply yields no rows.
        """

        stmt = (
            select(VocabularyItem)
            .where(
                VocabularyItem.language_profile_id == language_profile_id,
                VocabularyItem.user_id == user_id,
            )
            .order_by(VocabularyItem.created_at, VocabularyItem.id)
            .offset(page_offset(page, page_size))
            .limit(page_size)
        )
        return list(self.db.scalars(stmt))
