"""Language profile database model."""
from sqlalchemy import Boolean, Column, ForeignKey, String, Text

from langbuddy.db.base import Base
from langbuddy.db.types import UTCDateTime


class LanguageProfile(Base):
    """A user's declared learning track for one target language."""

    __tablename__ = "language_profiles"

    id = Column(String(36), primary_key=True)
    user_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    target_language = Column(Text, nullable=False)  # "en", "ta", "es", ...
    native_language = Column(Text)
    proficiency_level = Column(Text)  # "beginner", "intermediate", "advanced"
    goals = Column(Text)  # "travel", "exam", "business"

    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(UTCDateTime, nullable=False)
    updated_at = Column(UTCDateTime, nullable=False)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<LanguageProfile id={self.id!r} target_language={self.target_language!r}>"
