# localization_http_api/routers/dictionary.py

from __future__ import annotations

from typing import Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from localization.core.domain.exceptions import (
    DictionaryItemNotFoundError,
    LanguageNotFoundError,
)
from localization.core.domain.models import ROOT_PARENT_ID, DictionaryItem
from localization.core.services.localization_service import LocalizationService
from localization_http_api.dependencies import get_acting_user, get_localization_service, get_session
from localization_http_api.schemas.dictionary import (
    DictionaryItemCreate,
    DictionaryItemExists,
    DictionaryItemRead,
    DictionaryItemUpdate,
)

router = APIRouter(prefix="/dictionary", tags=["dictionary"])


def _apply_translations(
    service: LocalizationService,
    item: DictionaryItem,
    translations: Dict[str, str],
) -> None:
    for culture, value in translations.items():
        language = service.get_language_by_culture_code(culture)
        if language is None:
            raise HTTPException(
                status_code=422,
                detail=LanguageNotFoundError(culture).message,
            )
        item.set_translation(language, value)


def _is_self_or_descendant(
    service: LocalizationService,
    item: DictionaryItem,
    parent_id: UUID,
) -> bool:
    """Walk up from `parent_id` and report whether `item` is on the way to the root."""
    seen = set()
    current: Optional[UUID] = parent_id
    while current is not None and current != ROOT_PARENT_ID and current not in seen:
        if current == item.key:
            return True
        seen.add(current)
        parent = service.get_dictionary_item_by_key(current)
        current = parent.parent_id if parent is not None else None
    return False


def _require_item(service: LocalizationService, item_id: int) -> DictionaryItem:
    item = service.get_dictionary_item_by_id(item_id)
    if item is None:
        raise DictionaryItemNotFoundError(item_id)
    return item


# ---------------------------------------------------------------------------
# Reads (static paths first so they are not captured by /{item_id})
# ---------------------------------------------------------------------------


@router.get(
    "/roots",
    response_model=List[DictionaryItemRead],
    summary="List top-level dictionary items",
)
def list_root_items(
    *,
    service: LocalizationService = Depends(get_localization_service),
) -> List[DictionaryItem]:
    return service.get_root_dictionary_items()


@router.get(
    "/exists/{item_key}",
    response_model=DictionaryItemExists,
    summary="Check whether an item key is in use",
)
def item_key_exists(
    *,
    item_key: str,
    service: LocalizationService = Depends(get_localization_service),
) -> DictionaryItemExists:
    return DictionaryItemExists(item_key=item_key, exists=service.dictionary_item_exists(item_key))


@router.get(
    "/by-key/{key}",
    response_model=DictionaryItemRead,
    summary="Get a dictionary item by its unique key",
)
def get_item_by_key(
    *,
    key: UUID,
    service: LocalizationService = Depends(get_localization_service),
) -> DictionaryItem:
    item = service.get_dictionary_item_by_id(key)
    if item is None:
        raise DictionaryItemNotFoundError(key)
    return item


@router.get(
    "/by-item-key/{item_key}",
    response_model=DictionaryItemRead,
    summary="Get a dictionary item by its item key",
    description="Item keys are not unique; the item with the lowest id wins.",
)
def get_item_by_item_key(
    *,
    item_key: str,
    service: LocalizationService = Depends(get_localization_service),
) -> DictionaryItem:
    item = service.get_dictionary_item_by_item_key(item_key)
    if item is None:
        raise DictionaryItemNotFoundError(item_key)
    return item


@router.get(
    "/{key}/children",
    response_model=List[DictionaryItemRead],
    summary="List the direct children of a dictionary item",
)
def list_children(
    *,
    key: UUID,
    service: LocalizationService = Depends(get_localization_service),
) -> List[DictionaryItem]:
    return service.get_dictionary_item_children(key)


@router.get(
    "/{item_id}",
    response_model=DictionaryItemRead,
    summary="Get a dictionary item by id",
)
def get_item(
    *,
    item_id: int,
    service: LocalizationService = Depends(get_localization_service),
) -> DictionaryItem:
    return _require_item(service, item_id)


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------


@router.post(
    "",
    response_model=DictionaryItemRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a dictionary item",
)
def create_item(
    *,
    payload: DictionaryItemCreate,
    service: LocalizationService = Depends(get_localization_service),
    user_id: Optional[int] = Depends(get_acting_user),
) -> DictionaryItem:
    item = DictionaryItem(
        item_key=payload.item_key,
        parent_id=payload.parent_id or ROOT_PARENT_ID,
    )
    if payload.key is not None:
        item.key = payload.key

    _apply_translations(service, item, payload.translations)

    service.save_dictionary_item(item, user_id=user_id)
    if item.id is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Save was cancelled",
        )
    return item


@router.put(
    "/{item_id}",
    response_model=DictionaryItemRead,
    summary="Update a dictionary item",
)
def update_item(
    *,
    item_id: int,
    payload: DictionaryItemUpdate,
    service: LocalizationService = Depends(get_localization_service),
    session: Session = Depends(get_session),
    user_id: Optional[int] = Depends(get_acting_user),
) -> DictionaryItem:
    item = _require_item(service, item_id)

    if payload.item_key is not None:
        item.item_key = payload.item_key
    if payload.parent_id is not None:
        if _is_self_or_descendant(service, item, payload.parent_id):
            raise HTTPException(
                status_code=422,
                detail="An item cannot be moved under itself or one of its descendants",
            )
        item.parent_id = payload.parent_id
    if payload.translations is not None:
        _apply_translations(service, item, payload.translations)

    service.save_dictionary_item(item, user_id=user_id)
    if session.new or session.dirty:
        # a saving handler vetoed the update; drop the staged edits
        session.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Save was cancelled",
        )
    return item


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a dictionary item and all of its descendants",
)
def delete_item(
    *,
    item_id: int,
    service: LocalizationService = Depends(get_localization_service),
    user_id: Optional[int] = Depends(get_acting_user),
) -> None:
    item = _require_item(service, item_id)
    service.delete_dictionary_item(item, user_id=user_id)
