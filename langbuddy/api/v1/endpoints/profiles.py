"""Language profile endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from langbuddy.api import deps
from langbuddy.db.models.user import User
from langbuddy.schemas import (
    LanguageProfileCreate,
    LanguageProfileListPayload,
    LanguageProfilePayload,
    LanguageProfileRead,
    LanguageProfileUpdate,
    SuccessResponse,
)
from langbuddy.services.profiles import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.post(
    "",
    response_model=SuccessResponse[LanguageProfilePayload],
    status_code=status.HTTP_201_CREATED,
    operation_id="createProfile",
)
def create_profile(
    payload: LanguageProfileCreate,
    current_user: User = Depends(deps.get_current_user),
    service: ProfileService = Depends(deps.get_profile_service),
) -> SuccessResponse[LanguageProfilePayload]:
    """Create a language profile for the caller."""

    profile = service.create(current_user.id, payload)
    return SuccessResponse(
        data=LanguageProfilePayload(profile=LanguageProfileRead.model_validate(profile))
    )


@router.patch(
    "/{profile_id}",
    response_model=SuccessResponse[LanguageProfilePayload],
    operation_id="updateProfile",
)
def update_profile(
    profile_id: str,
    payload: LanguageProfileUpdate,
    current_user: User = Depends(deps.get_current_user),
    service: ProfileService = Depends(deps.get_profile_service),
) -> SuccessResponse[LanguageProfilePayload]:
    """Merge the supplied fields into one of the caller's profiles."""

    profile = service.update(current_user.id, profile_id, payload)
    return SuccessResponse(
        data=LanguageProfilePayload(profile=LanguageProfileRead.model_validate(profile))
    )


@router.get(
    "",
    response_model=SuccessResponse[LanguageProfileListPayload],
    operation_id="listProfiles",
)
def list_profiles(
    include_inactive: bool = Query(default=False),
    current_user: User = Depends(deps.get_current_user),
    service: ProfileService = Depends(deps.get_profile_service),
) -> SuccessResponse[LanguageProfileListPayload]:
    """Return the caller's profiles; inactive ones only on request."""

    profiles = service.list_profiles(current_user.id, include_inactive=include_inactive)
    items = [LanguageProfileRead.model_validate(profile) for profile in profiles]
    return SuccessResponse(data=LanguageProfileListPayload(items=items, total=len(items)))
