# localization_http_api/routers/audit.py

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from localization.adapters.persistence.audit_repository import SqlAlchemyAuditRepository
from localization.core.domain.models import AuditEntry, AuditType
from localization_http_api.dependencies import get_audit_repository
from localization_http_api.schemas.audit import AuditEntryRead

router = APIRouter(prefix="/audit", tags=["audit"])


@router.get(
    "",
    response_model=List[AuditEntryRead],
    summary="Recent audit entries, newest first",
)
def list_audit_entries(
    *,
    repo: SqlAlchemyAuditRepository = Depends(get_audit_repository),
    limit: int = Query(100, ge=1, le=1000),
    audit_type: Optional[AuditType] = Query(None),
    entity_id: Optional[int] = Query(None),
) -> List[AuditEntry]:
    return repo.list_recent(limit=limit, audit_type=audit_type, entity_id=entity_id)
