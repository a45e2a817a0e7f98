# localization/__init__.py
"""
Localization Service.

Dictionary items (localizable text keys organised in a tree) and languages,
persisted through SQLAlchemy behind Ports & Adapters, with cancelable
pre/post notifications and an audit trail.
"""

__version__ = "1.0.0"
