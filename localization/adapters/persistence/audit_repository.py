# localization/adapters/persistence/audit_repository.py

from __future__ import annotations

from typing import Optional

import structlog
from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from localization.core.domain.models import AuditEntry, AuditType

from .session import db_session

logger = structlog.get_logger()


class SqlAlchemyAuditRepository:
    """
    Audit sink backed by the `audit_entries` table.

    Each `add` runs in its own short-lived session and commits on its own,
    independently of the unit of work whose change is being audited.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def add(
        self,
        audit_type: AuditType,
        message: str,
        user_id: int,
        entity_id: Optional[int],
    ) -> None:
        with db_session(self._session_factory) as db:
            db.add(
                AuditEntry(
                    audit_type=audit_type,
                    message=message,
                    user_id=user_id,
                    entity_id=entity_id,
                )
            )

        logger.debug(
            "audit_entry_written",
            audit_type=audit_type.value,
            user_id=user_id,
            entity_id=entity_id,
        )

    def list_recent(
        self,
        *,
        limit: int = 100,
        audit_type: Optional[AuditType] = None,
        entity_id: Optional[int] = None,
    ) -> list[AuditEntry]:
        """
        Fetch recent audit entries with optional filters, newest first.
        """
        stmt = select(AuditEntry)

        if audit_type is not None:
            stmt = stmt.where(AuditEntry.audit_type == audit_type)
        if entity_id is not None:
            stmt = stmt.where(AuditEntry.entity_id == entity_id)

        stmt = stmt.order_by(AuditEntry.created_at.desc(), AuditEntry.id.desc()).limit(max(limit, 1))

        with self._session_factory() as db:
            return list(db.execute(stmt).scalars().all())
