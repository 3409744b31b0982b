"""
Observability Infrastructure

OpenTelemetry tracing and Prometheus metrics for product ingestion.
"""

from .metrics import catalog_step_failures_total, image_upload_duration, product_submissions_total
from .tracing import add_span_attributes, get_tracer, setup_tracing

__all__ = [
    "setup_tracing",
    "get_tracer",
    "add_span_attributes",
    "product_submissions_total",
    "catalog_step_failures_total",
    "image_upload_duration",
]
