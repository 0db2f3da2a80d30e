"""Pydantic schemas package."""

from langbuddy.schemas.auth import Token, TokenPayload
from langbuddy.schemas.common import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    EmptySuccessResponse,
    SuccessResponse,
)
from langbuddy.schemas.practice import (
    PracticeSessionComplete,
    PracticeSessionPage,
    PracticeSessionPayload,
    PracticeSessionRead,
    PracticeSessionStart,
)
from langbuddy.schemas.profile import (
    LanguageProfileCreate,
    LanguageProfileListPayload,
    LanguageProfilePayload,
    LanguageProfileRead,
    LanguageProfileUpdate,
)
from langbuddy.schemas.user import UserBase, UserCreate, UserLogin, UserRead
from langbuddy.schemas.vocabulary import (
    VocabularyItemPage,
    VocabularyItemPayload,
    VocabularyItemRead,
    VocabularyItemUpsert,
)

__all__ = [
    "Token",
    "TokenPayload",
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "EmptySuccessResponse",
    "SuccessResponse",
    "PracticeSessionComplete",
    "PracticeSessionPage",
    "PracticeSessionPayload",
    "PracticeSessionRead",
    "PracticeSessionStart",
    "LanguageProfileCreate",
    "LanguageProfileListPayload",
    "LanguageProfilePayload",
    "LanguageProfileRead",
    "LanguageProfileUpdate",
    "UserBase",
    "UserCreate",
    "UserLogin",
    "UserRead",
    "VocabularyItemPage",
    "VocabularyItemPayload",
    "VocabularyItemRead",
    "VocabularyItemUpsert",
]
