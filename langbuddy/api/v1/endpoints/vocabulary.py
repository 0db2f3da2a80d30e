"""Vocabulary item endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from langbuddy.api import deps
from langbuddy.db.models.user import User
from langbuddy.schemas import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    EmptySuccessResponse,
    SuccessResponse,
    VocabularyItemPage,
    VocabularyItemPayload,
    VocabularyItemRead,
    VocabularyItemUpsert,
)
from langbuddy.services.vocabulary import VocabularyService

router = APIRouter(prefix="/vocabulary", tags=["vocabulary"])


@router.put(
    "",
    response_model=SuccessResponse[VocabularyItemPayload],
    operation_id="upsertVocabularyItem",
)
def upsert_vocabulary_item(
    payload: VocabularyItemUpsert,
    current_user: User = Depends(deps.get_current_user),
    service: VocabularyService = Depends(deps.get_vocabulary_service),
) -> SuccessResponse[VocabularyItemPayload]:
    """Create a vocabulary item, or overwrite the one named by ``id``."""

    item = service.upsert(current_user.id, payload)
    return SuccessResponse(data=VocabularyItemPayload(item=item))


@router.delete(
    "/{item_id}",
    response_model=EmptySuccessResponse,
    operation_id="deleteVocabularyItem",
)
def delete_vocabulary_item(
    item_id: str,
    current_user: User = Depends(deps.get_current_user),
    service: VocabularyService = Depends(deps.get_vocabulary_service),
) -> EmptySuccessResponse:
    service.delete(current_user.id, item_id)
    return EmptySuccessResponse()


@router.get(
    "",
    response_model=SuccessResponse[VocabularyItemPage],
    operation_id="listVocabularyItems",
)
def list_vocabulary_items(
    language_profile_id: str = Query(..., min_length=1),
    page: int = Query(default=DEFAULT_PAGE, ge=1),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    current_user: User = Depends(deps.get_current_user),
    service: VocabularyService = Depends(deps.get_vocabulary_service),
) -> SuccessResponse[VocabularyItemPage]:
    """Return one page of vocabulary items for a profile."""

    items = service.list_items(
        current_user.id,
        language_profile_id=language_profile_id,
        page=page,
        page_size=page_size,
    )
    return SuccessResponse(
        data=VocabularyItemPage(
            items=[VocabularyItemRead.model_validate(item) for item in items],
            total=len(items),
            page=page,
            page_size=page_size,
        )
    )
