"""Pydantic schemas for language profile endpoints."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LanguageProfileCreate(BaseModel):
    """Input for creating a language profile."""

    target_language: str = Field(min_length=1)
    native_language: Optional[str] = None
    proficiency_level: Optional[str] = None
    goals: Optional[str] = None


class LanguageProfileUpdate(BaseModel):
    """Partial update; omitted or null fields keep their stored value."""

    target_language: Optional[str] = Field(default=None, min_length=1)
    native_language: Optional[str] = None
    proficiency_level: Optional[str] = None
    goals: Optional[str] = None
    is_active: Optional[bool] = None


class LanguageProfileRead(BaseModel):
    """Representation of a language profile."""

    id: str
    user_id: str
    target_language: str
    native_language: Optional[str] = None
    proficiency_level: Optional[str] = None
    goals: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LanguageProfilePayload(BaseModel):
    profile: LanguageProfileRead


class LanguageProfileListPayload(BaseModel):
    """All profiles visible to the caller."""

    items: list[LanguageProfileRead]
    total: int
