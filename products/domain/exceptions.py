"""
Error taxonomy for the product ingestion pipeline.

Each error carries the HTTP status it maps to, so the result mapper never
has to guess where a failure came from.
"""

from typing import Optional


class IngestionError(Exception):
    """Base class for every expected pipeline failure."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigError(IngestionError):
    """Required runtime configuration (credentials, bucket) is missing."""

    status_code = 500

    def __init__(self, message: str, missing: Optional[list] = None):
        super().__init__(message)
        self.missing = list(missing or [])


class ValidationError(IngestionError):
    """The submitted draft failed a required-field or range check."""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class UploadError(IngestionError):
    """The image hosting service did not return a public URL."""

    status_code = 500


class CatalogError(IngestionError):
    """
    A commerce platform call failed.

    Attributes:
        step: Name of the failing step (create_product, create_price, set_default_price)
        product_id: Product created before the failure, if any (left without a price)
    """

    def __init__(
        self,
        message: str,
        step: Optional[str] = None,
        status_code: int = 500,
        product_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.step = step
        self.status_code = status_code
        self.product_id = product_id
