"""Vocabulary database models."""
from sqlalchemy import Column, ForeignKey, Integer, String, Text

from langbuddy.db.base import Base
from langbuddy.db.types import UTCDateTime


class VocabularyItem(Base):
    """A term the user is learning, scoped to one language profile."""

    __tablename__ = "vocabulary_items"

    id = Column(String(36), primary_key=True)
    language_profile_id = Column(
        String(36), ForeignKey("language_profiles.id"), nullable=False, index=True
    )
    # Copy of the profile owner, so every query can filter by owner directly
    user_id = Column(String(36), nullable=False, index=True)

    term = Column(Text, nullable=False)
    translation = Column(Text)
    part_of_speech = Column(Text)
    example_sentence = Column(Text)
    example_translation = Column(Text)

    difficulty = Column(Text)  # "easy", "medium", "hard"
    tags = Column(Text)

    # Spaced repetition bookkeeping, stored as supplied by the client
    last_reviewed_at = Column(UTCDateTime)
    next_review_at = Column(UTCDateTime)
    success_streak = Column(Integer)
    total_reviews = Column(Integer)

    created_at = Column(UTCDateTime, nullable=False)
    updated_at = Column(UTCDateTime, nullable=False)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<VocabularyItem term={self.term!r} profile={self.language_profile_id!r}>"
