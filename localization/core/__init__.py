# localization/core/__init__.py
"""
Core Domain Layer.

Entities, event arguments, ports (Protocols) and the LocalizationService
facade. Nothing in here opens connections or reads configuration; the
infrastructure adapters are injected from the outside.
"""
