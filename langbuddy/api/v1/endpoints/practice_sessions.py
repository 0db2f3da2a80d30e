"""Practice session endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from langbuddy.api import deps
from langbuddy.db.models.user import User
from langbuddy.schemas import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PracticeSessionComplete,
    PracticeSessionPage,
    PracticeSessionPayload,
    PracticeSessionRead,
    PracticeSessionStart,
    SuccessResponse,
)
from langbuddy.services.practice import PracticeSessionService

router = APIRouter(prefix="/practice-sessions", tags=["practice-sessions"])


@router.post(
    "",
    response_model=SuccessResponse[PracticeSessionPayload],
    status_code=status.HTTP_201_CREATED,
    operation_id="startPracticeSession",
)
def start_practice_session(
    payload: PracticeSessionStart,
    current_user: User = Depends(deps.get_current_user),
    service: PracticeSessionService = Depends(deps.get_practice_session_service),
) -> SuccessResponse[PracticeSessionPayload]:
    """Open a practice session against one of the caller's profiles."""

    session = service.start(current_user.id, payload)
    return SuccessResponse(
        data=PracticeSessionPayload(session=PracticeSessionRead.model_validate(session))
    )


@router.post(
    "/{session_id}/complete",
    response_model=SuccessResponse[PracticeSessionPayload],
    operation_id="completePracticeSession",
)
def complete_practice_session(
    session_id: str,
    payload: PracticeSessionComplete,
    current_user: User = Depends(deps.get_current_user),
    service: PracticeSessionService = Depends(deps.get_practice_session_service),
) -> SuccessResponse[PracticeSessionPayload]:
    """Close a session and record its final score."""

    session = service.complete(current_user.id, session_id, payload)
    return SuccessResponse(
        data=PracticeSessionPayload(session=PracticeSessionRead.model_validate(session))
    )


@router.get(
    "",
    response_model=SuccessResponse[PracticeSessionPage],
    operation_id="listPracticeSessions",
)
def list_practice_sessions(
    language_profile_id: str = Query(..., min_length=1),
    page: int = Query(default=DEFAULT_PAGE, ge=1),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    current_user: User = Depends(deps.get_current_user),
    service: PracticeSessionService = Depends(deps.get_practice_session_service),
) -> SuccessResponse[PracticeSessionPage]:
    sessions = service.list_sessions(
        current_user.id,
        language_profile_id=language_profile_id,
        page=page,
        page_size=page_size,
    )
    return SuccessResponse(
        data=PracticeSessionPage(
            items=[PracticeSessionRead.model_validate(session) for session in sessions],
            total=len(sessions),
            page=page,
            page_size=page_size,
        )
    )
