# localization/core/ports/repository_factory.py
from __future__ import annotations

from typing import Protocol

from .dictionary_repository import IDictionaryRepository
from .language_repository import ILanguageRepository
from .unit_of_work import IUnitOfWork


class IRepositoryFactory(Protocol):
    """
    Port for building repositories bound to a unit of work, so that their
    writes are committed by that unit of work.
    """

    def create_dictionary_repository(self, unit_of_work: IUnitOfWork) -> IDictionaryRepository:
        ...

    def create_language_repository(self, unit_of_work: IUnitOfWork) -> ILanguageRepository:
        ...
