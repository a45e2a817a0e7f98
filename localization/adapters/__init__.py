# localization/adapters/__init__.py
"""
Infrastructure Adapters.

Concrete implementations of the core ports.
"""
