# tests/conftest.py
import pytest
from unittest.mock import MagicMock

from localization.adapters.persistence import (
    SqlAlchemyAuditRepository,
    SqlAlchemyRepositoryFactory,
    SqlAlchemyUnitOfWorkProvider,
    create_db_engine,
    create_session_factory,
    init_db,
)
from localization.core.domain.models import DictionaryItem, Language
from localization.core.ports.audit_sink import IAuditSink
from localization.core.ports.dictionary_repository import IDictionaryRepository
from localization.core.ports.language_repository import ILanguageRepository
from localization.core.ports.repository_factory import IRepositoryFactory
from localization.core.ports.unit_of_work import IUnitOfWork, IUnitOfWorkProvider
from localization.core.services.localization_service import LocalizationService


# ---------------------------------------------------------------------------
# Real SQLAlchemy adapters on a throwaway SQLite file
# ---------------------------------------------------------------------------

@pytest.fixture(scope="function")
def engine(tmp_path):
    """A fresh SQLite database with the full schema, one per test."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'localization.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture(scope="function")
def audit_repository(session_factory):
    return SqlAlchemyAuditRepository(session_factory)


@pytest.fixture(scope="function")
def service(session_factory, audit_repository):
    """A LocalizationService wired to the real SQLAlchemy adapters."""
    with LocalizationService(
        provider=SqlAlchemyUnitOfWorkProvider(session_factory),
        repositories=SqlAlchemyRepositoryFactory(),
        audit=audit_repository,
    ) as service:
        yield service


@pytest.fixture(scope="function")
def make_service(session_factory, audit_repository):
    """Factory for additional services against the same database."""
    created = []

    def _make(**kwargs):
        service = LocalizationService(
            provider=SqlAlchemyUnitOfWorkProvider(session_factory),
            repositories=SqlAlchemyRepositoryFactory(),
            audit=audit_repository,
            **kwargs,
        )
        created.append(service)
        return service

    yield _make

    for service in created:
        service.close()


# ---------------------------------------------------------------------------
# Mocked collaborators
# ---------------------------------------------------------------------------

@pytest.fixture(scope="function")
def mock_unit_of_work():
    return MagicMock(spec=IUnitOfWork)


@pytest.fixture(scope="function")
def mock_dictionary_repo():
    repo = MagicMock(spec=IDictionaryRepository)
    repo.get.return_value = None
    repo.find_by_key.return_value = []
    repo.find_by_item_key.return_value = []
    repo.find_by_parent.return_value = []
    return repo


@pytest.fixture(scope="function")
def mock_language_repo():
    repo = MagicMock(spec=ILanguageRepository)
    repo.get.return_value = None
    repo.find_by_culture_code.return_value = []
    repo.get_all.return_value = []
    return repo


@pytest.fixture(scope="function")
def mock_audit():
    return MagicMock(spec=IAuditSink)


@pytest.fixture(scope="function")
def mocked_service(mock_unit_of_work, mock_dictionary_repo, mock_language_repo, mock_audit):
    """A LocalizationService whose every collaborator is a mock."""
    provider = MagicMock(spec=IUnitOfWorkProvider)
    provider.get_unit_of_work.return_value = mock_unit_of_work

    repositories = MagicMock(spec=IRepositoryFactory)
    repositories.create_dictionary_repository.return_value = mock_dictionary_repo
    repositories.create_language_repository.return_value = mock_language_repo

    return LocalizationService(provider=provider, repositories=repositories, audit=mock_audit)


# ---------------------------------------------------------------------------
# Sample entities
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_item():
    return DictionaryItem(item_key="greeting")


@pytest.fixture
def sample_language():
    return Language(culture_name="en-US")
