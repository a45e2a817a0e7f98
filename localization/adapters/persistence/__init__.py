# localization/adapters/persistence/__init__.py
"""
SQLAlchemy persistence adapters.

    from localization.adapters.persistence import (
        create_session_factory,
        SqlAlchemyUnitOfWorkProvider,
        SqlAlchemyRepositoryFactory,
        SqlAlchemyAuditRepository,
    )
"""

from .audit_repository import SqlAlchemyAuditRepository
from .dictionary_repository import SqlAlchemyDictionaryRepository
from .language_repository import SqlAlchemyLanguageRepository
from .repository_factory import SqlAlchemyRepositoryFactory
from .session import (
    create_db_engine,
    create_session_factory,
    db_session,
    init_db,
    session_dependency,
)
from .unit_of_work import (
    SessionUnitOfWorkProvider,
    SqlAlchemyUnitOfWork,
    SqlAlchemyUnitOfWorkProvider,
)

__all__ = [
    "SqlAlchemyAuditRepository",
    "SqlAlchemyDictionaryRepository",
    "SqlAlchemyLanguageRepository",
    "SqlAlchemyRepositoryFactory",
    "create_db_engine",
    "create_session_factory",
    "db_session",
    "init_db",
    "session_dependency",
    "SessionUnitOfWorkProvider",
    "SqlAlchemyUnitOfWork",
    "SqlAlchemyUnitOfWorkProvider",
]
