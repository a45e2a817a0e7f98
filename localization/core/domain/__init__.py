from .models import (
    ROOT_PARENT_ID,
    AuditEntry,
    AuditType,
    Base,
    DictionaryItem,
    DictionaryTranslation,
    Language,
)
from .events import CancellableEventArgs, DeleteEventArgs, SaveEventArgs
from .exceptions import (
    DictionaryItemNotFoundError,
    DomainError,
    LanguageNotFoundError,
    UnsupportedEntityError,
)

__all__ = [
    "ROOT_PARENT_ID",
    "AuditEntry",
    "AuditType",
    "Base",
    "DictionaryItem",
    "DictionaryTranslation",
    "Language",
    "CancellableEventArgs",
    "DeleteEventArgs",
    "SaveEventArgs",
    "DictionaryItemNotFoundError",
    "DomainError",
    "LanguageNotFoundError",
    "UnsupportedEntityError",
]
