# localization_http_api/routers/languages.py

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from localization.core.domain.exceptions import LanguageNotFoundError
from localization.core.domain.models import Language
from localization.core.services.localization_service import LocalizationService
from localization_http_api.dependencies import get_acting_user, get_localization_service
from localization_http_api.schemas.languages import LanguageCreate, LanguageRead

router = APIRouter(prefix="/languages", tags=["languages"])


@router.get(
    "",
    response_model=List[LanguageRead],
    summary="List languages",
)
def list_languages(
    *,
    service: LocalizationService = Depends(get_localization_service),
) -> List[Language]:
    return service.get_all_languages()


@router.get(
    "/by-culture/{culture}",
    response_model=LanguageRead,
    summary="Get a language by culture code",
)
def get_language_by_culture(
    *,
    culture: str,
    service: LocalizationService = Depends(get_localization_service),
) -> Language:
    language = service.get_language_by_culture_code(culture)
    if language is None:
        raise LanguageNotFoundError(culture)
    return language


@router.get(
    "/{language_id}",
    response_model=LanguageRead,
    summary="Get a language by id",
)
def get_language(
    *,
    language_id: int,
    service: LocalizationService = Depends(get_localization_service),
) -> Language:
    language = service.get_language_by_id(language_id)
    if language is None:
        raise LanguageNotFoundError(language_id)
    return language


@router.post(
    "",
    response_model=LanguageRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a language",
)
def create_language(
    *,
    payload: LanguageCreate,
    service: LocalizationService = Depends(get_localization_service),
    user_id: Optional[int] = Depends(get_acting_user),
) -> Language:
    if service.get_language_by_culture_code(payload.culture_name) is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Language '{payload.culture_name}' already exists",
        )

    language = Language(culture_name=payload.culture_name)
    service.save_language(language, user_id=user_id)
    if language.id is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Save was cancelled",
        )
    return language


@router.delete(
    "/{language_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a language",
    description="Translations that reference the language are not removed.",
)
def delete_language(
    *,
    language_id: int,
    service: LocalizationService = Depends(get_localization_service),
    user_id: Optional[int] = Depends(get_acting_user),
) -> None:
    language = service.get_language_by_id(language_id)
    if language is None:
        raise LanguageNotFoundError(language_id)
    service.delete_language(language, user_id=user_id)
