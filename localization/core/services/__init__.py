# localization/core/services/__init__.py
from .localization_service import DEFAULT_SYSTEM_USER_ID, LocalizationService
from .notifications import EventHook, LocalizationEvents

__all__ = [
    "DEFAULT_SYSTEM_USER_ID",
    "EventHook",
    "LocalizationEvents",
    "LocalizationService",
]
