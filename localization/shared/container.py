# localization/shared/container.py
from dependency_injector import containers, providers

from localization.shared.config import settings
from localization.adapters.persistence.audit_repository import SqlAlchemyAuditRepository
from localization.adapters.persistence.repository_factory import SqlAlchemyRepositoryFactory
from localization.adapters.persistence.session import create_db_engine, create_session_factory
from localization.adapters.persistence.unit_of_work import SqlAlchemyUnitOfWorkProvider
from localization.core.services.localization_service import LocalizationService
from localization.core.services.notifications import LocalizationEvents


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the application.
    """

    # 1. Configuration
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Gateways (Infrastructure Adapters)

    # One engine / connection pool per process
    engine = providers.Singleton(
        create_db_engine,
        database_url=config.DATABASE_URL,
        echo=config.DATABASE_ECHO,
    )

    session_factory = providers.Singleton(
        create_session_factory,
        bind=engine,
    )

    unit_of_work_provider = providers.Singleton(
        SqlAlchemyUnitOfWorkProvider,
        session_factory=session_factory,
    )

    repository_factory = providers.Singleton(
        SqlAlchemyRepositoryFactory
    )

    audit_repository = providers.Singleton(
        SqlAlchemyAuditRepository,
        session_factory=session_factory,
    )

    # Handlers registered here are seen by every service this container builds.
    events = providers.Singleton(
        LocalizationEvents
    )

    # 3. Services

    # Factory: a new service (and unit of work) per call
    localization_service = providers.Factory(
        LocalizationService,
        provider=unit_of_work_provider,
        repositories=repository_factory,
        audit=audit_repository,
        events=events,
        system_user_id=config.SYSTEM_USER_ID,
    )


# Instantiate the container for global access (e.g. by FastAPI)
container = Container()
