# localization/core/domain/models.py

from __future__ import annotations

import enum
import uuid
from datetime import datetime, timezone
from typing import Any, List, Optional

from sqlalchemy import (
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import (
    Mapped,
    declarative_base,
    mapped_column,
    relationship,
)

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

Base = declarative_base()

# Parent id shared by every top-level dictionary item.
ROOT_PARENT_ID = uuid.UUID("41c7638d-f529-4bff-853e-59a0c2fb1bde")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class AuditType(str, enum.Enum):
    """Kind of mutation recorded in the audit trail."""

    SAVE = "save"
    DELETE = "delete"


# ---------------------------------------------------------------------------
# Languages
# ---------------------------------------------------------------------------


class Language(Base):
    """
    A language available for translations, identified by its culture code
    (e.g. "en-US", "da-DK").
    """

    __tablename__ = "languages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    culture_name: Mapped[str] = mapped_column(
        String(32), unique=True, index=True, nullable=False
    )

    def __repr__(self) -> str:
        return f"<Language id={self.id!r} culture_name={self.culture_name!r}>"


# ---------------------------------------------------------------------------
# Dictionary items
# ---------------------------------------------------------------------------


class DictionaryItem(Base):
    """
    A localizable text key.

    Items form a tree: `parent_id` holds the `key` of the parent item, or
    `ROOT_PARENT_ID` for top-level items. Deleting an item removes its
    descendants (handled by the dictionary repository) and its translations.
    """

    __tablename__ = "dictionary_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    key: Mapped[uuid.UUID] = mapped_column(
        Uuid, unique=True, index=True, nullable=False, default=uuid.uuid4
    )
    item_key: Mapped[str] = mapped_column(String(1000), index=True, nullable=False)
    parent_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, index=True, nullable=True
    )

    translations: Mapped[List["DictionaryTranslation"]] = relationship(
        "DictionaryTranslation",
        back_populates="item",
        cascade="all, delete-orphan",
    )

    def __init__(self, item_key: str, parent_id: Optional[uuid.UUID] = ROOT_PARENT_ID, **kwargs: Any) -> None:
        kwargs.setdefault("key", uuid.uuid4())
        super().__init__(item_key=item_key, parent_id=parent_id, **kwargs)

    def translation_for(self, language: Language) -> Optional[str]:
        """Return the translated value for `language`, or None."""
        for translation in self.translations:
            if translation.language_id == language.id:
                return translation.value
        return None

    def set_translation(self, language: Language, value: str) -> "DictionaryTranslation":
        """
        Add or replace the translation for `language`.

        The language must already have been saved, since translations
        reference it by id.
        """
        if language.id is None:
            raise ValueError(
                f"Language {language.culture_name!r} must be saved before it can be translated into."
            )

        for translation in self.translations:
            if translation.language_id == language.id:
                translation.value = value
                return translation

        translation = DictionaryTranslation(language_id=language.id, value=value)
        self.translations.append(translation)
        return translation

    def __repr__(self) -> str:
        return (
            f"<DictionaryItem id={self.id!r} key={self.key!s} "
            f"item_key={self.item_key!r}>"
        )


class DictionaryTranslation(Base):
    """
    The text of a dictionary item in one language.

    `language_id` is deliberately not a foreign key: languages can be
    deleted while translations still point at them.
    """

    __tablename__ = "dictionary_translations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    item_id: Mapped[int] = mapped_column(
        ForeignKey("dictionary_items.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    language_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    value: Mapped[str] = mapped_column(Text, nullable=False, default="")

    item: Mapped["DictionaryItem"] = relationship(
        "DictionaryItem",
        back_populates="translations",
    )

    def __repr__(self) -> str:
        return (
            f"<DictionaryTranslation id={self.id!r} item_id={self.item_id!r} "
            f"language_id={self.language_id!r}>"
        )


# ---------------------------------------------------------------------------
# Audit trail
# ---------------------------------------------------------------------------


class AuditEntry(Base):
    """One audit record written after a committed save or delete."""

    __tablename__ = "audit_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    audit_type: Mapped[AuditType] = mapped_column(
        SQLEnum(AuditType, name="audit_type_enum"),
        nullable=False,
        index=True,
    )
    message: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    entity_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<AuditEntry id={self.id!r} type={self.audit_type.value!r} "
            f"entity_id={self.entity_id!r}>"
        )
