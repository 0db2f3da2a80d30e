"""Pydantic schemas for practice session endpoints."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PracticeSessionStart(BaseModel):
    """Input for opening a practice session."""

    language_profile_id: str = Field(min_length=1)
    mode: Optional[str] = None
    total_questions: Optional[int] = None
    notes: Optional[str] = None


class PracticeSessionComplete(BaseModel):
    """Closing values; omitted counters and notes keep their stored value."""

    total_questions: Optional[int] = None
    correct_answers: Optional[int] = None
    notes: Optional[str] = None
    ended_at: Optional[datetime] = None


class PracticeSessionRead(BaseModel):
    """Representation of a practice session."""

    id: str
    language_profile_id: str
    user_id: str
    mode: Optional[str] = None
    started_at: datetime
    ended_at: Optional[datetime] = None
    total_questions: Optional[int] = None
    correct_answers: Optional[int] = None
    notes: Optional[str] = None
    created_at: datetime
    is_open: bool

    model_config = ConfigDict(from_attributes=True)


class PracticeSessionPayload(BaseModel):
    session: PracticeSessionRead


class PracticeSessionPage(BaseModel):
    """One page of practice sessions; ``total`` counts this page only."""

    items: list[PracticeSessionRead]
    total: int
    page: int
    page_size: int
