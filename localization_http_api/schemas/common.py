# localization_http_api/schemas/common.py

from __future__ import annotations

from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints


# ---------------------------------------------------------------------------
# Base / shared types
# ---------------------------------------------------------------------------


class APIModel(BaseModel):
    """
    Base Pydantic model for all HTTP API schemas.

    Common config:
    - forbid extra fields so the frontend gets early feedback on mistakes
    - read attributes straight off ORM objects
    """

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        from_attributes=True,
    )


# BCP-47-ish culture code ("en", "fr", "en-US", "zh-Hant-TW", etc.)
CultureCode = Annotated[
    str,
    StringConstraints(
        min_length=2,
        max_length=32,
        pattern=r"^[A-Za-z]{2,3}(-[A-Za-z0-9]+)*$",
    ),
]


class ErrorResponse(APIModel):
    """
    Standard error payload.
    """

    detail: str = Field(..., description="Human-readable error message")
    code: Optional[str] = Field(
        default=None,
        description="Machine-readable error code, e.g. 'not_found'",
    )
    extra: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Additional structured information about the error",
    )
