"""FastAPI application factory."""
from __future__ import annotations

from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from langbuddy.api.v1 import api_router
from langbuddy.config import settings
from langbuddy.utils.exceptions import register_exception_handlers


tags_metadata: List[dict[str, str]] = [
    {"name": "auth", "description": "Register users and issue authentication tokens."},
    {"name": "users", "description": "Inspect the signed-in identity."},
    {"name": "profiles", "description": "Manage per-language learning profiles."},
    {"name": "vocabulary", "description": "Track vocabulary items within a profile."},
    {"name": "practice-sessions", "description": "Log practice runs and their scores."},
]


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance."""

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Track language profiles, vocabulary and practice sessions.",
        version="0.1.0",
        openapi_tags=tags_metadata,
        docs_url=f"{settings.API_V1_STR}/docs",
        redoc_url=f"{settings.API_V1_STR}/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.API_V1_STR)
    return app


app = create_app()
