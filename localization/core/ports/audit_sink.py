# localization/core/ports/audit_sink.py
from __future__ import annotations

from typing import Optional, Protocol

from localization.core.domain.models import AuditType


class IAuditSink(Protocol):
    """
    Port for the audit trail.

    The service writes one record per committed mutation and does not look
    at the result.
    """

    def add(
        self,
        audit_type: AuditType,
        message: str,
        user_id: int,
        entity_id: Optional[int],
    ) -> None:
        ...
