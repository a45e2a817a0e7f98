# tests/__init__.py
"""
Test Suite for the Localization Service.

Organization:
- `core`: LocalizationService and notification hooks, against real SQLite or mocked ports.
- `adapters`: SQLAlchemy repositories, unit of work and audit sink.
- `http_api`: End-to-end API tests through the FastAPI TestClient.
"""
