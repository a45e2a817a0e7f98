# localization/shared/observability.py
from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from localization.shared.config import settings


def setup_observability(app: FastAPI) -> None:
    """
    Configures OpenTelemetry for the application.

    1. Sets the Global Tracer Provider.
    2. Prints finished spans to the console when DEBUG is on.
    3. Auto-instruments the FastAPI application to trace all HTTP requests.
    4. Attaches the provider to the app so request handlers can reach it.
    """
    resource = Resource.create(attributes={
        "service.name": settings.APP_NAME,
        "service.environment": settings.APP_ENV.value,
    })

    provider = TracerProvider(resource=resource)

    if settings.DEBUG:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)

    # One server span per request (method, route, status code)
    FastAPIInstrumentor.instrument_app(app, tracer_provider=provider)
    app.state.tracer_provider = provider


def get_tracer(name: str):
    """
    Utility to get a tracer for manual instrumentation in services.
    Usage:
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("my_custom_logic"):
            ...
    """
    return trace.get_tracer(name)
