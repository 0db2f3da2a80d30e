"""API router for version 1."""
from fastapi import APIRouter

from langbuddy.api.v1.endpoints import (
    auth,
    practice_sessions,
    profiles,
    users,
    vocabulary,
)


api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(profiles.router)
api_router.include_router(vocabulary.router)
api_router.include_router(practice_sessions.router)
