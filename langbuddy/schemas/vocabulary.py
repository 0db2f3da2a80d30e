"""Pydantic schemas for vocabulary endpoints."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class VocabularyItemUpsert(BaseModel):
    """Create a vocabulary item, or overwrite one when ``id`` is given."""

    id: Optional[str] = None
    language_profile_id: str = Field(min_length=1)
    term: str = Field(min_length=1)
    translation: Optional[str] = None
    part_of_speech: Optional[str] = None
    example_sentence: Optional[str] = None
    example_translation: Optional[str] = None
    difficulty: Optional[str] = None
    tags: Optional[str] = None
    last_reviewed_at: Optional[datetime] = None
    next_review_at: Optional[datetime] = None
    success_streak: Optional[int] = None
    total_reviews: Optional[int] = None


class VocabularyItemRead(BaseModel):
    """Representation of a vocabulary item."""

    id: str
    language_profile_id: str
    user_id: str
    term: str
    translation: Optional[str] = None
    part_of_speech: Optional[str] = None
    example_sentence: Optional[str] = None
    example_translation: Optional[str] = None
    difficulty: Optional[str] = None
    tags: Optional[str] = None
    last_reviewed_at: Optional[datetime] = None
    next_review_at: Optional[datetime] = None
    success_streak: Optional[int] = None
    total_reviews: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class VocabularyItemPayload(BaseModel):
    item: VocabularyItemRead


class VocabularyItemPage(BaseModel):
    """One page of vocabulary items.

    ``total`` is the number of items on this page, not the size of the
    whole collection.
    """

    items: list[VocabularyItemRead]
    total: int
    page: int
    page_size: int
