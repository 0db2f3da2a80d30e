"""Database models package."""
from langbuddy.db.models.user import User
from langbuddy.db.models.profile import LanguageProfile
from langbuddy.db.models.vocabulary import VocabularyItem
from langbuddy.db.models.practice import PracticeSession

__all__ = [
    "User",
    "LanguageProfile",
    "VocabularyItem",
    "PracticeSession",
]
