# localization/adapters/persistence/repository_factory.py

from __future__ import annotations

from .dictionary_repository import SqlAlchemyDictionaryRepository
from .language_repository import SqlAlchemyLanguageRepository
from .unit_of_work import SqlAlchemyUnitOfWork


class SqlAlchemyRepositoryFactory:
    """Builds repositories that stage their writes in a unit of work's session."""

    def create_dictionary_repository(self, unit_of_work: SqlAlchemyUnitOfWork) -> SqlAlchemyDictionaryRepository:
        return SqlAlchemyDictionaryRepository(unit_of_work.session)

    def create_language_repository(self, unit_of_work: SqlAlchemyUnitOfWork) -> SqlAlchemyLanguageRepository:
        return SqlAlchemyLanguageRepository(unit_of_work.session)
