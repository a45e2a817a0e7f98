# localization/core/ports/language_repository.py
from __future__ import annotations

from typing import List, Optional, Protocol

from localization.core.domain.models import Language


class ILanguageRepository(Protocol):
    """Port for reading and writing languages."""

    def get(self, language_id: int) -> Optional[Language]:
        ...

    def find_by_culture_code(self, culture: str) -> List[Language]:
        ...

    def get_all(self) -> List[Language]:
        ...

    def add_or_update(self, language: Language) -> None:
        ...

    def delete(self, language: Language) -> None:
        """
        Removes the language only. Translations that reference it are
        left in place.
        """
        ...
