"""
Top-level export module for HTTP API schemas.
"""

from .audit import AuditEntryRead
from .common import APIModel, CultureCode, ErrorResponse
from .dictionary import (
    DictionaryItemCreate,
    DictionaryItemExists,
    DictionaryItemRead,
    DictionaryItemUpdate,
    TranslationRead,
)
from .languages import LanguageCreate, LanguageRead

__all__ = [
    "APIModel",
    "CultureCode",
    "ErrorResponse",
    "AuditEntryRead",
    "DictionaryItemCreate",
    "DictionaryItemExists",
    "DictionaryItemRead",
    "DictionaryItemUpdate",
    "TranslationRead",
    "LanguageCreate",
    "LanguageRead",
]
