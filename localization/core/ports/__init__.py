# localization/core/ports/__init__.py
"""
Core Ports (Interfaces).

Protocols the persistence adapters must implement so the
LocalizationService can run against SQLAlchemy, an in-memory fake, or
a mock in tests without knowing which one it has.
"""

from .audit_sink import IAuditSink
from .dictionary_repository import IDictionaryRepository
from .language_repository import ILanguageRepository
from .repository_factory import IRepositoryFactory
from .unit_of_work import IUnitOfWork, IUnitOfWorkProvider

__all__ = [
    "IAuditSink",
    "IDictionaryRepository",
    "ILanguageRepository",
    "IRepositoryFactory",
    "IUnitOfWork",
    "IUnitOfWorkProvider",
]
