"""
localization_http_api/schemas/dictionary.py

Pydantic models for the dictionary-item endpoints.

Translations are addressed by culture code on the way in (the client
rarely knows language ids) and come back with both the language id and
the stored value.
"""

from __future__ import annotations

from typing import Dict, List, Optional
from uuid import UUID

from pydantic import Field

from .common import APIModel, CultureCode


class TranslationRead(APIModel):
    language_id: int
    value: str


class DictionaryItemCreate(APIModel):
    """
    Payload for creating a dictionary item.

    Omit `parent_id` to create a top-level item; omit `key` to let the
    backend generate one.
    """

    item_key: str = Field(..., min_length=1, max_length=1000, description="Lookup name, e.g. 'greeting'")
    key: Optional[UUID] = Field(default=None, description="Unique key; generated when omitted")
    parent_id: Optional[UUID] = Field(default=None, description="Key of the parent item")
    translations: Dict[CultureCode, str] = Field(
        default_factory=dict,
        description="Culture code -> translated text",
    )


class DictionaryItemUpdate(APIModel):
    """Partial update; only the fields that are set are applied."""

    item_key: Optional[str] = Field(default=None, min_length=1, max_length=1000)
    parent_id: Optional[UUID] = None
    translations: Optional[Dict[CultureCode, str]] = None


class DictionaryItemRead(APIModel):
    id: int
    key: UUID
    item_key: str
    parent_id: Optional[UUID] = None
    translations: List[TranslationRead] = Field(default_factory=list)


class DictionaryItemExists(APIModel):
    item_key: str
    exists: bool
