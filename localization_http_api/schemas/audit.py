# localization_http_api/schemas/audit.py

from __future__ import annotations

from datetime import datetime
from typing import Optional

from localization.core.domain.models import AuditType

from .common import APIModel


class AuditEntryRead(APIModel):
    id: int
    audit_type: AuditType
    message: str
    user_id: int
    entity_id: Optional[int] = None
    created_at: datetime
