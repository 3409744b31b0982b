"""
OpenTelemetry Tracing

Sets up the tracer provider for the product ingestion service. Finished
spans are printed to stdout when console export is on; otherwise they are
recorded but not exported.
"""

import logging

from opentelemetry import trace
from opentelemetry.instrumentation.django import DjangoInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

logger = logging.getLogger(__name__)

_initialized = False

# Span attribute values OpenTelemetry accepts without conversion
_PRIMITIVE_TYPES = (bool, int, float, str)


def setup_tracing(
    service_name: str = "product-ingestion-service",
    console_export: bool = False,
    enable: bool = True,
) -> None:
    """
    Install the tracer provider and instrument Django.

    Calling it more than once is a no-op.

    Args:
        service_name: Value of the ``service.name`` resource attribute
        console_export: Print finished spans to stdout
        enable: When False nothing is installed and spans are no-ops
    """
    global _initialized

    if _initialized:
        logger.debug(f"Tracing for {service_name} already set up")
        return

    if not enable:
        logger.info("Tracing disabled via configuration")
        return

    provider = TracerProvider(resource=Resource(attributes={SERVICE_NAME: service_name}))
    if console_export:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(provider)

    DjangoInstrumentor().instrument()

    _initialized = True
    logger.info(f"Tracing enabled for {service_name} (console export: {console_export})")


def get_tracer(name: str) -> trace.Tracer:
    """
    Tracer for a module.

    Safe to call at import time: spans started before ``setup_tracing``
    runs are no-ops, later ones go to the installed provider.
    """
    return trace.get_tracer(name)


def add_span_attributes(span: trace.Span, **attributes) -> None:
    """Set attributes on a span. None values are skipped, non-primitive values are stringified."""
    for key, value in attributes.items():
        if value is None:
            continue
        span.set_attribute(key, value if isinstance(value, _PRIMITIVE_TYPES) else str(value))
