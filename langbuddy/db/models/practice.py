"""Practice session database model."""
from sqlalchemy import Column, ForeignKey, Integer, String, Text

from langbuddy.db.base import Base
from langbuddy.db.types import UTCDateTime


class PracticeSession(Base):
    """One practice run against a language profile."""

    __tablename__ = "practice_sessions"

    id = Column(String(36), primary_key=True)
    language_profile_id = Column(
        String(36), ForeignKey("language_profiles.id"), nullable=False, index=True
    )
    user_id = Column(String(36), nullable=False, index=True)

    mode = Column(Text)  # "flashcards", "quiz", "conversation"
    started_at = Column(UTCDateTime, nullable=False)
    ended_at = Column(UTCDateTime)  # NULL while the session is open

    total_questions = Column(Integer)
    correct_answers = Column(Integer)
    notes = Column(Text)

    created_at = Column(UTCDateTime, nullable=False)

    @property
    def is_open(self) -> bool:
        return self.ended_at is None
