# localization/shared/__init__.py
"""
Shared utilities package.

Cross-cutting concerns used by both the Core Domain and the adapters:
- Configuration management
- Structured logging
- Distributed tracing (Observability)
- Dependency Injection wiring
"""
