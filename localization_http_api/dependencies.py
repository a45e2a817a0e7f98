# localization_http_api/dependencies.py

from __future__ import annotations

from typing import Generator, Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from localization.adapters.persistence.audit_repository import SqlAlchemyAuditRepository
from localization.adapters.persistence.session import session_dependency
from localization.adapters.persistence.unit_of_work import SessionUnitOfWorkProvider
from localization.core.services.localization_service import LocalizationService
from localization.shared.container import container


def get_session() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session from the container's
    session factory and closes it when the request is done.
    """
    yield from session_dependency(container.session_factory())


def get_localization_service(session: Session = Depends(get_session)) -> LocalizationService:
    """
    A LocalizationService whose unit of work is the request's session.

    Override this in tests with `app.dependency_overrides`.
    """
    return container.localization_service(provider=SessionUnitOfWorkProvider(session))


def get_audit_repository() -> SqlAlchemyAuditRepository:
    return container.audit_repository()


def get_acting_user(
    x_user_id: Optional[int] = Header(default=None, alias="X-User-Id"),
) -> Optional[int]:
    """Acting user for the audit trail; None lets the service use its system user."""
    return x_user_id
