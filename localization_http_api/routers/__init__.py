# localization_http_api/routers/__init__.py
from . import audit, dictionary, languages

__all__ = ["audit", "dictionary", "languages"]
