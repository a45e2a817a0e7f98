# localization_http_api/__init__.py
"""
HTTP API for the Localization Service.

    uvicorn localization_http_api.main:app --host 0.0.0.0 --port 8000
"""
