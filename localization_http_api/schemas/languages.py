# localization_http_api/schemas/languages.py

from __future__ import annotations

from .common import APIModel, CultureCode


class LanguageCreate(APIModel):
    culture_name: CultureCode


class LanguageRead(APIModel):
    id: int
    culture_name: str
