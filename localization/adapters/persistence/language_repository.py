# localization/adapters/persistence/language_repository.py

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from localization.adapters.persistence.session import flush_or_rollback
from localization.core.domain.models import Language


class SqlAlchemyLanguageRepository:
    """Thin data-access layer around the Language model."""

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def get(self, language_id: int) -> Optional[Language]:
        return self._session.get(Language, language_id)

    def find_by_culture_code(self, culture: str) -> List[Language]:
        stmt = select(Language).where(Language.culture_name == culture).order_by(Language.id)
        return list(self._session.execute(stmt).scalars().all())

    def get_all(self) -> List[Language]:
        stmt = select(Language).order_by(Language.id)
        return list(self._session.execute(stmt).scalars().all())

    def add_or_update(self, language: Language) -> None:
        if language in self._session or language.id is None:
            self._session.add(language)
        else:
            self._session.merge(language)
        flush_or_rollback(self._session)

    def delete(self, language: Language) -> None:
        # No constraints on dictionary_translations.language_id: references
        # to this language are left as they are.
        if language in self._session:
            target = language
        elif language.id is not None:
            target = self._session.get(Language, language.id)
        else:
            target = None

        if target is None:
            return

        self._session.delete(target)
        flush_or_rollback(self._session)
