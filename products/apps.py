import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class ProductsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "products"

    def ready(self):
        """
        Initialize product ingestion context.
        """
        try:
            from django.conf import settings

            from products.infra.observability.tracing import setup_tracing

            setup_tracing(
                service_name=getattr(settings, "OTEL_SERVICE_NAME", "product-ingestion-service"),
                console_export=getattr(settings, "OTEL_CONSOLE_EXPORT", False),
                enable=getattr(settings, "OTEL_TRACING_ENABLED", False),
            )
        except Exception as e:
            logger.warning(f"Failed to initialize OpenTelemetry tracing: {e}")
