"""API endpoint modules for v1."""

from langbuddy.api.v1.endpoints import (
    auth,
    practice_sessions,
    profiles,
    users,
    vocabulary,
)

__all__ = [
    "auth",
    "practice_sessions",
    "profiles",
    "users",
    "vocabulary",
]
