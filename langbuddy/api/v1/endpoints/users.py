"""User endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from langbuddy.api import deps
from langbuddy.db.models.user import User
from langbuddy.schemas import UserRead

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(deps.get_current_user)) -> User:
    """Return the authenticated user."""

    return current_user
